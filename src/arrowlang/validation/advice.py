# Copyright 2026 arrowlang Contributors
# SPDX-License-Identifier: Apache-2.0

"""Style hints derived from raw source text.

The checks are plain substring tests on the unfiltered text. They know nothing
about tokens and run regardless of whether the statement is valid.
"""

# ###############
# Public Interface
# ###############

MISSING_ARROW_ADVICE = "use '<-' for assignment"
EQUALS_ADVICE = "assignment with '=' detected, check if it should be '<-'"
NO_ADVICE = "no suggestions; code is clear"


def advise(source: str) -> list[str]:
    """Return the style hints for *source*, in a fixed order.

    Checks performed:

    1. **Missing arrow**: the text does not contain ``<-`` anywhere.
    2. **Equals sign**: the text contains ``=`` anywhere.

    Both checks are independent and can fire together. When neither fires the
    result is the single ``NO_ADVICE`` message, so the list is never empty.
    """
    advisories: list[str] = []
    if "<-" not in source:
        advisories.append(MISSING_ARROW_ADVICE)
    if "=" in source:
        advisories.append(EQUALS_ADVICE)
    if not advisories:
        advisories.append(NO_ADVICE)
    return advisories
