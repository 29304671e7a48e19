"""
ReviewRot - Review freshness and profile health scoring.

Look up a local business, score how stale its reviews are and how complete
its profile is, and hand the result to lead capture and notification channels.

CLI Usage:
    reviewrot rot "Joe's Plumbing Austin"
    reviewrot audit "Joe's Plumbing Austin" -f json | jq '.overall_score'
    reviewrot web  # Start the HTTP API

Library Usage:
    from reviewrot import score_rot, audit_snapshot, BusinessSnapshot

    report = score_rot(45)
    print(report.rot_score, report.status, report.urgency)
"""

__version__ = "1.2.0"
__author__ = "ReviewRot"

# Semantic versioning
# MAJOR.MINOR.PATCH
VERSION_INFO = {
    "major": 1,
    "minor": 2,
    "patch": 0,
    "release": "stable",  # stable, beta, alpha
}


def get_version() -> str:
    """Get full version string."""
    version = f"{VERSION_INFO['major']}.{VERSION_INFO['minor']}.{VERSION_INFO['patch']}"
    if VERSION_INFO["release"] != "stable":
        version += f"-{VERSION_INFO['release']}"
    return version


from reviewrot.models import BusinessSnapshot, Review, ScoreReport, RotReport
from reviewrot.scoring import score_rot, audit_snapshot

__all__ = [
    "score_rot",
    "audit_snapshot",
    "BusinessSnapshot",
    "Review",
    "ScoreReport",
    "RotReport",
    "__version__",
    "get_version",
    "VERSION_INFO",
]
