"""Tests for the context_builder module."""

import logging

from readergen.catalog import AWS_FUNCTIONS
from readergen.config import GeneratorConfig
from readergen.context_builder import build_context, build_function_context, build_method_context
from readergen.descriptor import Descriptor


class TestBuildContext:
    """Test the full context builder with the AWS catalog."""

    @classmethod
    def setup_class(cls):
        cls.ctx = build_context(AWS_FUNCTIONS, GeneratorConfig())
        cls.functions_by_name = {f["name"]: f for f in cls.ctx["functions"]}

    def test_method_count(self):
        assert self.ctx["method_count"] == len(AWS_FUNCTIONS)

    def test_methods_keep_input_order(self):
        assert [m["entity"] for m in self.ctx["methods"]] == [d.entity for d in AWS_FUNCTIONS]

    def test_skip_body_excluded_from_functions(self):
        skipped = [d for d in AWS_FUNCTIONS if d.skip_body]
        assert skipped, "catalog should exercise skip_body"
        assert self.ctx["function_count"] == len(AWS_FUNCTIONS) - len(skipped)
        assert "GetResourceRecordSets" not in self.functions_by_name

    def test_skip_body_still_declared(self):
        signatures = [m["signature"] for m in self.ctx["methods"]]
        assert any(s.startswith("GetResourceRecordSets(") for s in signatures)

    def test_all_method_names_unique(self):
        names = [m["signature"].split("(")[0] for m in self.ctx["methods"]]
        assert len(names) == len(set(names))

    def test_config_values(self):
        assert self.ctx["package_name"] == "reader"
        assert self.ctx["interface_name"] == "Reader"
        assert self.ctx["receiver"] == "connector"

    def test_owner_filter(self):
        fn = self.functions_by_name["GetOwnImages"]
        assert fn["filter_by_owner"] == "Owners"
        assert fn["paginated"] is False

    def test_every_function_has_service(self):
        for fn in self.ctx["functions"]:
            assert fn["service"], f"{fn['name']} has no service"


class TestBuildMethodContext:

    def test_doc_lines(self):
        d = Descriptor(entity="Things", documentation="First line\nSecond line\n")
        assert build_method_context(d)["doc_lines"] == ["First line", "Second line"]

    def test_doc_lines_strip_comment_marker(self):
        d = Descriptor(entity="Things", documentation="// GetThings returns things")
        assert build_method_context(d)["doc_lines"] == ["GetThings returns things"]

    def test_no_documentation(self):
        assert build_method_context(Descriptor(entity="Things"))["doc_lines"] == []


class TestBuildFunctionContext:

    def test_instances(self, instances):
        fn = build_function_context(instances)
        assert fn["name"] == "GetInstances"
        assert fn["input"] == "ec2.DescribeInstancesInput"
        assert fn["output"] == "[]*ec2.Instance"
        assert fn["service_entity_fn"] == "DescribeInstances"
        assert fn["shape"] == "slice"
        assert fn["merge"] == "append"
        assert fn["attribute"] == "Instances"
        assert fn["inner_attribute"] == ""
        assert fn["pagination_field"] == "NextToken"
        assert fn["input_pagination_field"] == "NextToken"

    def test_iterated(self):
        d = Descriptor(entity="SecurityGroups", attribute_path="Reservations#Instances")
        fn = build_function_context(d)
        assert fn["merge"] == "flatten"
        assert fn["attribute"] == "Reservations"
        assert fn["inner_attribute"] == "Instances"


class TestDuplicates:

    def test_duplicates_are_kept(self, config):
        d = Descriptor(entity="Instances", prefix="Describe", service="ec2")
        ctx = build_context([d, d], config)
        assert [m["signature"].split("(")[0] for m in ctx["methods"]] == ["GetInstances", "GetInstances"]


class TestWarnings:

    def test_conflicting_shapes_logged(self, config, caplog):
        d = Descriptor(entity="Things", single_result=True, is_map=True)
        with caplog.at_level(logging.WARNING, logger="readergen"):
            ctx = build_context([d], config)
        assert ctx["functions"][0]["shape"] == "single"
        assert "single_result wins" in caplog.text
        assert "'Things'" in caplog.text


class TestContextKeys:
    """Contexts only carry what the templates read."""

    def test_method_keys(self, instances):
        assert set(build_method_context(instances)) == {"entity", "signature", "doc_lines"}

    def test_receiver_reaches_functions(self, instances):
        from readergen.codegen import render_source

        source = render_source([instances], GeneratorConfig(receiver="awsConnector"))
        assert "func (c *awsConnector) GetInstances(" in source
