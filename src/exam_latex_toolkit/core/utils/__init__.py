"""
Utils Package

Loading papers and questions from API payloads and JSON files.
"""

from .serialization import (
    paper_from_dict,
    paper_to_dict,
    question_from_dict,
    load_paper_json,
    save_paper_json,
)

__all__ = [
    "paper_from_dict",
    "paper_to_dict",
    "question_from_dict",
    "load_paper_json",
    "save_paper_json",
]
