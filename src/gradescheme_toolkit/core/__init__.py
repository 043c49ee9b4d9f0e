"""
Grading Scheme Toolkit Core Package

Stored models, numeric conversions and validation shared by the editor,
the Qt model and the command line.

**STORED VS DISPLAY UNITS:**

1. **Stored units**
   - Row lower bounds are fractions (0-1) of the scaling factor
   - The scaling factor is 1.0 for percentages, or the maximum points

2. **Display units**
   - Percentages 0-100, or raw points
   - Only the editor works in display units; everything in this
     package that is persisted or validated is in stored units
"""

from .models import GradingSchemeData, GradingSchemeDataRow, InitialFormData
from .schemas import ValidationError, validate_grading_scheme

__all__ = [
    "GradingSchemeData",
    "GradingSchemeDataRow",
    "InitialFormData",
    "ValidationError",
    "validate_grading_scheme",
]
