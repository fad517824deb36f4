#!/usr/bin/env python3
"""
Example: Basic usage of js-complexity as a Python library
"""

from pathlib import Path

from js_complexity import analyze
from js_complexity.formatters import get_formatter

sample = Path(__file__).parent / "sample.js"

# Analyse one file; tolerant=True would accept files with syntax errors
results = analyze([sample])

# Walk the records directly
for result in results:
    print(f"{result.file.path}: {result.file.package_complexity} imports")
    for fn in result.functions.values():
        print(
            f"  {fn.name}() line {fn.start_line}: "
            f"complexity {fn.cyclomatic_complexity}, nesting {fn.max_nesting_depth}"
        )
print()

# Or render the fixed-format report
get_formatter("text").render(results)
