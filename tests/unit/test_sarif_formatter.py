import json

import pytest

from code_scanning_report.domain import DetailLevel
from code_scanning_report.formatters import ReportFormatter, SarifFormatter, map_severity_to_level
from code_scanning_report.formatters.sarif import SARIF_SCHEMA


def sarif(alerts, level=DetailLevel.MEDIUM):
    return json.loads(SarifFormatter().format(alerts, level, "octo/app"))


class TestSeverityMapping:
    @pytest.mark.parametrize(
        ("severity", "expected"),
        [
            ("error", "error"),
            ("ERROR", "error"),
            ("critical", "error"),
            ("Critical", "error"),
            ("warning", "warning"),
            ("Medium", "warning"),
            ("note", "note"),
            ("low", "note"),
            ("high", "note"),
            ("unrecognized", "note"),
            ("", "note"),
        ],
    )
    def test_maps_case_insensitively(self, severity, expected) -> None:
        assert map_severity_to_level(severity) == expected


class TestSarifEnvelope:
    def test_implements_protocol(self) -> None:
        assert isinstance(SarifFormatter(), ReportFormatter)

    def test_name_and_extension(self) -> None:
        assert SarifFormatter().name == "sarif"
        assert SarifFormatter().extension == "sarif"

    def test_top_level_fields(self, make_alert) -> None:
        log = sarif([make_alert()])

        assert log["$schema"] == SARIF_SCHEMA
        assert log["version"] == "2.1.0"
        assert len(log["runs"]) == 1
        assert log["runs"][0]["tool"]["driver"]["name"] == "CodeQL"

    def test_empty_alerts_produce_empty_run(self) -> None:
        log = sarif([], DetailLevel.FULL)

        assert log["runs"][0]["results"] == []
        assert log["runs"][0]["tool"]["driver"]["version"] == "1.0.0"


class TestSarifToolVersion:
    def test_full_uses_first_alert_tool_version(self, make_alert) -> None:
        alerts = [make_alert(tool_version="2.15.0"), make_alert(number=2, tool_version="9.9.9")]

        log = sarif(alerts, DetailLevel.FULL)

        assert log["runs"][0]["tool"]["driver"]["version"] == "2.15.0"

    @pytest.mark.parametrize("level", [DetailLevel.MINIMUM, DetailLevel.MEDIUM])
    def test_other_levels_use_placeholder(self, make_alert, level) -> None:
        log = sarif([make_alert(tool_version="2.15.0")], level)

        assert log["runs"][0]["tool"]["driver"]["version"] == "1.0.0"

    def test_full_without_tool_version_uses_placeholder(self, make_alert) -> None:
        log = sarif([make_alert(tool_version=None)], DetailLevel.FULL)

        assert log["runs"][0]["tool"]["driver"]["version"] == "1.0.0"


class TestSarifResults:
    def test_one_result_per_alert(self, make_alert) -> None:
        alerts = [make_alert(number=n) for n in range(1, 4)]

        assert len(sarif(alerts)["runs"][0]["results"]) == 3

    def test_result_fields(self, make_alert) -> None:
        result = sarif([make_alert(severity="Medium")])["runs"][0]["results"][0]

        assert result["ruleId"] == "js/sql-injection"
        assert result["level"] == "warning"
        assert result["message"] == {"text": "This query depends on a user-provided value."}
        assert result["locations"] == [
            {
                "physicalLocation": {
                    "artifactLocation": {"uri": "src/database.js"},
                    "region": {"startLine": 10, "startColumn": 5},
                }
            }
        ]

    def test_minimum_defaults_column_to_one(self, make_alert) -> None:
        result = sarif([make_alert(start_column=17)], DetailLevel.MINIMUM)["runs"][0]["results"][0]

        assert result["locations"][0]["physicalLocation"]["region"]["startColumn"] == 1


class TestSarifRaw:
    def test_raw_bypasses_sarif_envelope(self, make_alert) -> None:
        alert = make_alert()

        data = json.loads(SarifFormatter().format([alert], DetailLevel.RAW, "octo/app"))

        assert isinstance(data, list)
        assert data == [alert.to_dict()]
        assert "most_recent_instance" in data[0]
