"""Scripted edits on existing PowerPoint decks.

Usage:
    from deckedit import run

    run("Resources/Presentation.pptx", "Resources/NewPresentation.pptx", "Resources/earth.jpg")
"""

from deckedit.services.edit import duplicate_file, run
from deckedit.services.outline import outline_file, outline_presentation

__all__ = ["duplicate_file", "outline_file", "outline_presentation", "run"]
