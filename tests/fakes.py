import datetime

from botocore.exceptions import ClientError


def client_error(code, operation):
    return ClientError({"Error": {"Code": code, "Message": f"{code} raised by test"}}, operation)


class FakePaginator:
    def __init__(self, pages, fail_at=None):
        self.pages = pages
        self.fail_at = fail_at

    def paginate(self, **kwargs):
        for i, page in enumerate(self.pages):
            if i == self.fail_at:
                raise client_error("ThrottlingException", "ListRuleGroups")
            yield page


class FakeNetworkFirewall:
    """In-memory stand-in for a boto3 network-firewall client."""

    def __init__(self, pages=None, responses=None, fail_list_at=None):
        self.pages = pages or []
        self.responses = responses or {}
        self.fail_list_at = fail_list_at
        self.describe_calls = []

    def get_paginator(self, operation_name):
        assert operation_name == "list_rule_groups"
        return FakePaginator(self.pages, self.fail_list_at)

    def describe_rule_group(self, **kwargs):
        self.describe_calls.append(kwargs)
        resp = self.responses[kwargs["RuleGroupArn"]]
        if isinstance(resp, Exception):
            raise resp
        return resp


class FakeS3:
    def __init__(self, fail_keys=()):
        self.objects = {}
        self.puts = []
        self.fail_keys = fail_keys

    def put_object(self, Bucket, Key, Body):
        self.puts.append((Bucket, Key))
        if any(part in Key for part in self.fail_keys):
            raise client_error("AccessDenied", "PutObject")
        self.objects[(Bucket, Key)] = Body
        return {"ETag": '"test"'}


class FakeCloudWatch:
    def __init__(self, fail=False):
        self.metrics = []
        self.fail = fail

    def put_metric_data(self, Namespace, MetricData):
        if self.fail:
            raise client_error("InternalFailure", "PutMetricData")
        for datum in MetricData:
            self.metrics.append((Namespace, datum["MetricName"], datum["Value"]))


def arn_for(name):
    return f"arn:aws:network-firewall:us-west-1:111122223333:stateful-rulegroup/{name}"


def rule_group_page(*names, next_token=None):
    page = {"RuleGroups": [{"Name": n, "Arn": arn_for(n)} for n in names]}
    if next_token:
        page["NextToken"] = next_token
    return page


def describe_response(rules=None):
    rules_source = {} if rules is None else {"RulesString": rules}
    return {"UpdateToken": "token", "RuleGroup": {"RulesSource": rules_source}}


FIXED_TIME = datetime.datetime(2024, 3, 9, 7, 5, 2, tzinfo=datetime.timezone.utc)
