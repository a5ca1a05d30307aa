"""Scrutinizer SDK type definitions.

This module exports all data model types used by the SDK.
"""

from scrutinizer.types.reports import (
    BranchSettings,
    CommitAuthor,
    DevelopmentReportSettings,
    EmbeddedRepository,
    LargestCommit,
    Link,
    Links,
    QualityDistribution,
    QualityWeights,
    ReportDetails,
    TopContributor,
)
from scrutinizer.types.repos import AddRepositoryRequest, RepositorySummary

__all__ = [
    # Repository types
    "RepositorySummary",
    "AddRepositoryRequest",
    # Report types
    "ReportDetails",
    "QualityDistribution",
    "QualityWeights",
    "LargestCommit",
    "CommitAuthor",
    "TopContributor",
    "Links",
    "Link",
    "EmbeddedRepository",
    "DevelopmentReportSettings",
    "BranchSettings",
]
