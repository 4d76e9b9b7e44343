"""Core business logic layer.

Subpackages:
- catalog: recipe catalog queries by slot and preference
- planning: weekly plan generation
- shopping: building shopping lists
- reporting: calorie summaries for plan views
"""
__all__ = ["catalog", "planning", "shopping", "reporting"]
