#!/usr/bin/env python3
"""
Basic Scrutinizer SDK usage example.

Registers a repository if the service does not know it yet, then prints its
latest quality report.

Run with: python examples/basic_usage.py <access-token> <owner> <name>
"""

import logging
import sys

from scrutinizer import Provider, ScrutinizerClient, ScrutinizerError, configure_logging

configure_logging(level=logging.INFO, http_level=logging.DEBUG)

if len(sys.argv) != 4:
    print(__doc__)
    sys.exit(2)

token, owner, name = sys.argv[1:]

with ScrutinizerClient(access_token=token) as client:
    try:
        repo = client.get_repo(Provider.GITHUB, owner, name)
        if repo is None:
            print(f"{owner}/{name} is not monitored yet, adding it...")
            client.add_repo(Provider.GITHUB, owner, name)
            sys.exit(0)

        print(f"{repo.login}/{repo.name} (default branch: {repo.default_branch})")

        report = client.get_report_details(Provider.GITHUB, owner, name)
        if report is None:
            print("No report available")
            sys.exit(0)

        print(f"Quality score: {report.quality_score} ({report.quality_score_change:+})")
        print(f"Issues: {report.nb_issues} ({report.nb_issues_change:+})")
        for contributor in report.top_contributors:
            print(f"  {contributor.name}: {contributor.nb_commits} commits")
    except ScrutinizerError as e:
        print(f"Error [{e.code}]: {e}")
        sys.exit(1)
