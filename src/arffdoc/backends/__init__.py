"""Backends for arffdoc output generation (ARFF, CSV)."""

from .arff_writer import generate_arff, save_arff_file
from .csv_export import generate_csv, save_csv_file

__all__ = ["generate_arff", "save_arff_file", "generate_csv", "save_csv_file"]
