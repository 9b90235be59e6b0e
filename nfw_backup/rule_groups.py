# rule_groups.py
# Read side: list Network Firewall rule groups and fetch their Suricata rules.
import logging
from typing import List, NamedTuple

from botocore.exceptions import BotoCoreError, ClientError

from nfw_backup.errors import DescribeFailure, ListFailure

logger = logging.getLogger(__name__)

STATEFUL = "STATEFUL"


class RuleGroupRef(NamedTuple):
    name: str
    arn: str


def list_rule_groups(network_firewall) -> List[RuleGroupRef]:
    """Return every rule group in the client's region, in the order the API pages them.

    Any page error raises ListFailure and nothing collected so far is returned.
    """
    logger.info("Listing rule groups...")
    rule_groups = []
    paginator = network_firewall.get_paginator("list_rule_groups")
    try:
        for page in paginator.paginate():
            for rg in page.get("RuleGroups", []):
                rule_groups.append(RuleGroupRef(name=rg.get("Name", ""), arn=rg.get("Arn", "")))
    except (ClientError, BotoCoreError) as e:
        logger.error("Error fetching rule groups page: %s", e)
        raise ListFailure(f"Listing rule groups failed: {e}") from e
    logger.info("Found %d rule groups.", len(rule_groups))
    return rule_groups


def fetch_stateful_rules(network_firewall, rule_group_arn) -> str:
    """Return the rules string of a stateful rule group, or "" if it has none."""
    logger.info("Fetching Suricata rules for Rule Group ARN: %s", rule_group_arn)
    try:
        resp = network_firewall.describe_rule_group(RuleGroupArn=rule_group_arn, Type=STATEFUL)
    except (ClientError, BotoCoreError) as e:
        logger.error("Error fetching Suricata rules for ARN %s: %s", rule_group_arn, e)
        raise DescribeFailure(f"Describing rule group {rule_group_arn} failed: {e}") from e

    rules_source = (resp.get("RuleGroup") or {}).get("RulesSource") or {}
    rules = rules_source.get("RulesString")
    if rules is not None:
        logger.info("Successfully fetched rules for ARN: %s", rule_group_arn)
        return rules
    logger.info("No rules found for ARN: %s", rule_group_arn)
    return ""
