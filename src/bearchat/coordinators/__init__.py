"""Coordinators - Orchestration layer connecting UI with business logic."""

from .translation_coordinator import TranslationCoordinator

__all__ = ["TranslationCoordinator"]
