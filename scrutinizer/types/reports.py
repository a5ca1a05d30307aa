"""Report-related data models."""

from dataclasses import dataclass, field


@dataclass
class QualityWeights:
    """Share of code in each quality bucket."""

    very_good: float = 0.0
    good: float = 0.0
    satisfactory: float = 0.0
    pass_: float = 0.0  # wire key "pass"
    critical: float = 0.0


@dataclass
class QualityDistribution:
    weights: QualityWeights = field(default_factory=QualityWeights)


@dataclass
class CommitAuthor:
    name: str = ""
    email: str = ""


@dataclass
class LargestCommit:
    """One of the biggest commits in the report period."""

    author: CommitAuthor = field(default_factory=CommitAuthor)
    title: str = ""
    ref: str = ""


@dataclass
class TopContributor:
    """Contributor ranked by activity in the report period."""

    name: str = ""
    email: str = ""
    nb_commits: int = 0
    nb_additions: int = 0
    nb_deletions: int = 0


@dataclass
class Link:
    href: str = ""


@dataclass
class Links:
    """HAL-style links ("_links")."""

    self_link: Link = field(default_factory=Link)  # wire key "self"
    repository: Link = field(default_factory=Link)


@dataclass
class DevelopmentReportSettings:
    """Scheduling of the periodic development report."""

    enabled: bool = False
    weekday: int = 0
    hour: int = 0
    timezone: str = ""


@dataclass
class BranchSettings:
    tracked_branches: list[str] = field(default_factory=list)


@dataclass
class EmbeddedRepository:
    """Repository embedded in a report ("_embedded.repository")."""

    kind: str = ""  # wire key "type"
    created_at: str = ""
    private: bool = False
    default_branch: str = ""
    development_report_settings: DevelopmentReportSettings = field(
        default_factory=DevelopmentReportSettings
    )
    branch_settings: BranchSettings = field(default_factory=BranchSettings)
    login: str = ""
    name: str = ""
    links: Links = field(default_factory=Links)


@dataclass
class ReportDetails:
    """Quality report for a repository."""

    date: str = ""
    created_at: str = ""
    start_date: str = ""
    end_date: str = ""
    branch_reference: str = ""
    base_source_reference: str = ""
    head_source_reference: str = ""
    quality_score: float = 0.0
    quality_score_change: float = 0.0
    quality_distribution: QualityDistribution = field(default_factory=QualityDistribution)
    nb_alerts: int = 0
    nb_alerts_change: int = 0
    nb_issues: int = 0
    nb_issues_change: int = 0
    test_coverage_change: int = 0
    nb_commits: int = 0
    nb_additions: int = 0
    nb_deletions: int = 0
    largest_commits: list[LargestCommit] = field(default_factory=list)
    top_contributors: list[TopContributor] = field(default_factory=list)
    algorithm_changed: bool = False
    links: Links = field(default_factory=Links)
    repository: EmbeddedRepository = field(default_factory=EmbeddedRepository)
