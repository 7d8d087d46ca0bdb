# This project was developed with assistance from AI tools.
"""Shared test factory functions for applicants and policies."""

from evae.schemas.applicant import ApplicantInput
from evae.schemas.policy import Policy


def make_applicant(**overrides) -> ApplicantInput:
    """Build an applicant that clears every gate under the default policy.

    Income 600, loan 3000, assets 600, no other debt: DTI ~18.4%,
    down payment ~16.7%, LTI 5.0.
    """
    fields = {
        "income_man": 600,
        "loan_request_man": 3000,
        "assets_man": 600,
        "other_debt_man": 0,
    }
    fields.update(overrides)
    return ApplicantInput(**fields)


def make_policy(**overrides) -> Policy:
    """Default policy with selected thresholds replaced."""
    return Policy(**overrides)
