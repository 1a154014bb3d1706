"""
Components package for the change-detection engine.
Provides CandidateExtractor and ChangeDetector.
"""
from services.components.candidate_extractor import CandidateExtractor
from services.components.change_detector import ChangeDetector

__all__ = [
    "CandidateExtractor",
    "ChangeDetector",
]
