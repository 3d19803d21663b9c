# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tiered Validation Demo: collect every failure, then decide what to do.

This demo walks through the three ways of finishing a validation:
returning the aggregated error, aborting, and aborting into a boundary
that turns the abort back into an ordinary result.

Run with:
    python examples/tiered_validation_demo.py
"""

from dataclasses import dataclass, field
from typing import List

from vala import (
    Equals,
    GreaterThan,
    HasLen,
    IsNotNil,
    Not,
    Or,
    StringNotEmpty,
    ValidationAbort,
    ValidationError,
    begin_validation,
    checker,
    recover,
    validation_boundary,
)


@dataclass
class Report:
    type: str
    name: str
    collaborators: List[str] = field(default_factory=list)


@dataclass
class Repository:
    type: str
    uploaders: List[str] = field(default_factory=list)


@checker
def report_fits_repository(report, repository):
    return (
        report.type == repository.type,
        f"A {report.type} report does not belong in a {repository.type} repository.",
    )


@checker
def author_is_collaborator(author, report):
    return (
        author in report.collaborators,
        "The given author was not one of the collaborators for this report.",
    )


def banner(title):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def demo_check():
    """Collect failures and get them back as a value."""
    banner("DEMO 1: check() returns the aggregated error")

    report = Report(type="finance", name="", collaborators=["ada"])
    error = begin_validation().validate(
        StringNotEmpty(report.name, "report.name"),
        HasLen(report.collaborators, 2, "report.collaborators"),
        Not(Equals(report.type, "finance", "report.type")),
    ).check()

    print(error)


def demo_tiers():
    """Stop at the first tier that fails."""
    banner("DEMO 2: check_and_abort() between tiers")

    report = None
    try:
        begin_validation().validate(
            IsNotNil(report, "report"),
        ).check_and_abort().validate(
            StringNotEmpty(report.name, "report.name"),
        ).check()
    except ValidationAbort as exc:
        print(f"{type(exc).__name__}: {exc}")


@validation_boundary(on_failure=lambda error: {"status": "rejected", "why": list(error.reasons)})
def handle_report(author, report, repository):
    begin_validation().validate(
        author_is_collaborator(author, report),
        report_fits_repository(report, repository),
        Or(
            GreaterThan(len(repository.uploaders), 0, "repository.uploaders"),
            Equals(author, "admin", "author"),
        ),
    ).check_and_abort()
    return {"status": "accepted"}


def demo_boundary():
    """Turn an abort back into a return value at the function edge."""
    banner("DEMO 3: @validation_boundary and recover()")

    report = Report(type="finance", name="Q3", collaborators=["ada"])
    print(handle_report("ada", report, Repository(type="finance", uploaders=["ada"])))
    print(handle_report("mallory", report, Repository(type="legal")))

    with recover() as slot:
        begin_validation().validate(
            StringNotEmpty("", "author"),
        ).check_set_error_and_abort(slot)
    assert isinstance(slot.error, ValidationError)
    print(f"recovered: {slot.error}")


if __name__ == "__main__":
    demo_check()
    demo_tiers()
    demo_boundary()
