"""Reports resource client."""

from typing import TYPE_CHECKING, Any

from scrutinizer.clients._fields import (
    get_bool,
    get_float,
    get_int,
    get_object,
    get_objects,
    get_str,
    get_strings,
    require_object,
)
from scrutinizer.envelope import raise_for_error, read_envelope
from scrutinizer.providers import Provider
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

if TYPE_CHECKING:
    from scrutinizer.transport import HTTPTransport


def _parse_link(data: dict[str, Any]) -> Link:
    return Link(href=get_str(data, "href"))


def _parse_links(data: dict[str, Any]) -> Links:
    return Links(
        self_link=_parse_link(get_object(data, "self")),
        repository=_parse_link(get_object(data, "repository")),
    )


def _parse_quality_distribution(data: dict[str, Any]) -> QualityDistribution:
    weights = get_object(data, "weights")
    return QualityDistribution(
        weights=QualityWeights(
            very_good=get_float(weights, "very_good"),
            good=get_float(weights, "good"),
            satisfactory=get_float(weights, "satisfactory"),
            pass_=get_float(weights, "pass"),
            critical=get_float(weights, "critical"),
        )
    )


def _parse_largest_commit(data: dict[str, Any]) -> LargestCommit:
    author = get_object(data, "author")
    return LargestCommit(
        author=CommitAuthor(name=get_str(author, "name"), email=get_str(author, "email")),
        title=get_str(data, "title"),
        ref=get_str(data, "ref"),
    )


def _parse_top_contributor(data: dict[str, Any]) -> TopContributor:
    return TopContributor(
        name=get_str(data, "name"),
        email=get_str(data, "email"),
        nb_commits=get_int(data, "nbCommits"),
        nb_additions=get_int(data, "nbAdditions"),
        nb_deletions=get_int(data, "nbDeletions"),
    )


def _parse_embedded_repository(data: dict[str, Any]) -> EmbeddedRepository:
    settings = get_object(data, "development_report_settings")
    branches = get_object(data, "branch_settings")
    return EmbeddedRepository(
        kind=get_str(data, "type"),
        created_at=get_str(data, "created_at"),
        private=get_bool(data, "private"),
        default_branch=get_str(data, "default_branch"),
        development_report_settings=DevelopmentReportSettings(
            enabled=get_bool(settings, "enabled"),
            weekday=get_int(settings, "weekday"),
            hour=get_int(settings, "hour"),
            timezone=get_str(settings, "timezone"),
        ),
        branch_settings=BranchSettings(
            tracked_branches=get_strings(branches, "tracked_branches"),
        ),
        login=get_str(data, "login"),
        name=get_str(data, "name"),
        links=_parse_links(get_object(data, "_links")),
    )


def _parse_report_details(data: dict[str, Any]) -> ReportDetails:
    """Parse a report payload, keeping the service's snake_case keys."""
    return ReportDetails(
        date=get_str(data, "date"),
        created_at=get_str(data, "created_at"),
        start_date=get_str(data, "start_date"),
        end_date=get_str(data, "end_date"),
        branch_reference=get_str(data, "branch_reference"),
        base_source_reference=get_str(data, "base_source_reference"),
        head_source_reference=get_str(data, "head_source_reference"),
        quality_score=get_float(data, "quality_score"),
        quality_score_change=get_float(data, "quality_score_change"),
        quality_distribution=_parse_quality_distribution(
            get_object(data, "quality_distribution")
        ),
        nb_alerts=get_int(data, "nb_alerts"),
        nb_alerts_change=get_int(data, "nb_alerts_change"),
        nb_issues=get_int(data, "nb_issues"),
        nb_issues_change=get_int(data, "nb_issues_change"),
        test_coverage_change=get_int(data, "test_coverage_change"),
        nb_commits=get_int(data, "nb_commits"),
        nb_additions=get_int(data, "nb_additions"),
        nb_deletions=get_int(data, "nb_deletions"),
        largest_commits=[
            _parse_largest_commit(item) for item in get_objects(data, "largest_commits")
        ],
        top_contributors=[
            _parse_top_contributor(item) for item in get_objects(data, "top_contributors")
        ],
        algorithm_changed=get_bool(data, "algorithm_changed"),
        links=_parse_links(get_object(data, "_links")),
        repository=_parse_embedded_repository(
            get_object(get_object(data, "_embedded"), "repository")
        ),
    )


class ReportsClient:
    """Client for quality-report operations."""

    def __init__(self, transport: "HTTPTransport") -> None:
        self.transport = transport

    def get_details(
        self,
        provider: Provider | str,
        owner: str,
        name: str,
    ) -> ReportDetails | None:
        """
        Get the quality report of a repository.

        Args:
            provider: Hosting provider (Provider.GITHUB or Provider.BITBUCKET)
            owner: Repository owner login
            name: Repository name

        Returns:
            ReportDetails, or None if the service does not know the repository

        Raises:
            MissingCredentialError: If no access token is set
            TransportError: On network failure or timeout
            DecodeError: If the body is not valid JSON for a report
            ServiceError: If the service returns an error payload
        """
        self.transport.auth.validate()
        tag = Provider.parse(provider).tag

        url = self.transport.url_for(tag, "repositories", owner, name)
        response = self.transport.send_authenticated_request("GET", url)

        envelope = read_envelope(response)
        if raise_for_error(envelope):
            return None

        return _parse_report_details(require_object(envelope.payload, "report"))
