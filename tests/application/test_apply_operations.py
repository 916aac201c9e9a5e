"""Tests for the ApplyOperations use case."""

from decimal import Decimal

import pytest

from stockroom.application.apply_operations import ApplyOperationsHandler
from stockroom.application.dto import OperationSpec
from stockroom.domain.exceptions import InvalidArgumentError


def _ops(*texts):
    return [OperationSpec.parse(t) for t in texts]


class TestOperationSpec:

    def test_parse(self):
        spec = OperationSpec.parse("add:5")
        assert spec == OperationSpec("add", "5")
        assert str(spec) == "add:5"

    def test_parse_normalises_kind_and_whitespace(self):
        assert OperationSpec.parse(" Price : 19.90 ") == OperationSpec("price", "19.90")

    @pytest.mark.parametrize("text", ["add", "add:", "restock:5"])
    def test_parse_rejects_malformed(self, text):
        with pytest.raises(InvalidArgumentError) as exc_info:
            OperationSpec.parse(text)
        assert exc_info.value.field == "operation"


class TestApplyOperationsHappyPath:

    def test_create_only(self):
        report = ApplyOperationsHandler().handle("Notebook", Decimal("2500.00"), 10, [])

        assert report.created
        assert len(report.outcomes) == 1
        assert report.final.stock == 10
        assert report.final.price == "$2,500.00"
        assert report.final.summary == "Product: Notebook, Price: $2,500.00, Stock: 10"

    def test_every_step_has_a_snapshot(self):
        report = ApplyOperationsHandler().handle(
            "Notebook", Decimal("2500.00"), 10, _ops("add:5", "remove:8", "price:1999.90")
        )

        assert [o.operation for o in report.outcomes] == [
            "create", "add:5", "remove:8", "price:1999.90",
        ]
        assert [o.snapshot.stock for o in report.outcomes] == [10, 15, 7, 7]
        assert report.final.price == "$1,999.90"
        assert report.failures == []

    def test_currency_used_for_snapshots(self):
        report = ApplyOperationsHandler(currency="EUR").handle("Pen", "2", 1, [])
        assert report.final.price == "€2.00"


class TestApplyOperationsFailures:

    def test_construction_failure_reports_single_outcome(self):
        report = ApplyOperationsHandler().handle("Tablet", Decimal("-100.00"), 5, _ops("add:1"))

        assert not report.created
        assert len(report.outcomes) == 1
        failure = report.outcomes[0]
        assert failure.operation == "create"
        assert failure.error_kind == "out_of_range"
        assert failure.field == "price"
        assert report.final is None

    def test_domain_rule_violation_recorded_and_run_continues(self):
        report = ApplyOperationsHandler().handle(
            "Notebook", Decimal("2500.00"), 10, _ops("add:5", "remove:8", "remove:20", "add:1")
        )

        failure = report.failures[0]
        assert failure.operation == "remove:20"
        assert failure.error_kind == "domain_rule_violation"
        assert "Current stock: 7" in failure.message
        assert "requested: 20" in failure.message
        assert report.final.stock == 8

    def test_stop_on_error(self):
        report = ApplyOperationsHandler().handle(
            "Notebook", Decimal("2500.00"), 10,
            _ops("remove:20", "add:1"),
            stop_on_error=True,
        )

        assert [o.operation for o in report.outcomes] == ["create", "remove:20"]
        assert report.final.stock == 10

    def test_non_numeric_quantity_is_invalid_argument(self):
        report = ApplyOperationsHandler().handle("Pen", "2", 1, _ops("add:lots"))

        failure = report.failures[0]
        assert failure.error_kind == "invalid_argument"
        assert failure.field == "quantity"

    def test_negative_price_update_keeps_price(self):
        report = ApplyOperationsHandler().handle("Pen", "2", 1, _ops("price:-1"))

        assert report.failures[0].error_kind == "out_of_range"
        assert report.final.price == "$2.00"
