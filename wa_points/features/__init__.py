"""
Feature modules for World Athletics scoring.

Each feature is a self-contained module with:
- models.py - Domain types (Enums, dataclasses)
- schemas.py - Pydantic schemas for reference data (optional)
- service.py - Business logic (optional)
- calculators/ - Calculation logic (optional)
"""
