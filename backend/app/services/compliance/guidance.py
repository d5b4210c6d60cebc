"""
Annual Report Guidance

Static guidance shown alongside the requirement card.
"""

ANNUAL_REPORT_GUIDANCE = {
    "overview": (
        "Annual reports are state-mandated filings that keep your business in good "
        "standing. These reports update the state with current information about your "
        "business, including address changes, management updates, and operational status."
    ),
    "benefits": [
        "Maintains business good standing status",
        "Prevents administrative dissolution",
        "Updates public records with current information",
        "Required for certain business transactions",
        "Demonstrates compliance to partners and lenders",
    ],
    "requirements": [
        "Current legal business name",
        "Principal office address",
        "Registered agent information",
        "Management/officer information",
        "State-specific additional data",
        "Required filing fees (varies by state)",
    ],
    "timeline": [
        "90 days before due date: Begin preparation",
        "30 days before due date: Complete form review",
        "7 days before due date: Submit filing",
        "Due date: Final deadline",
        "Grace period: Varies by state (typically 30-90 days)",
        "After grace period: Late fees and penalties apply",
    ],
    "penalties": [
        "Late filing fees (typically $50-$250)",
        "Monthly penalties in some states",
        "Loss of good standing status",
        "Administrative dissolution proceedings",
        "Inability to conduct business legally",
        "Additional costs for reinstatement",
    ],
}


def get_annual_report_guidance() -> dict:
    """Return a copy so callers cannot edit the shared content."""
    return {
        key: list(value) if isinstance(value, list) else value
        for key, value in ANNUAL_REPORT_GUIDANCE.items()
    }
