"""Domain models for code scanning alerts and their detail-level projections."""

from dataclasses import asdict, dataclass, field
from enum import StrEnum
from typing import Any, ClassVar


class DetailLevel(StrEnum):
    """How much of an alert is surfaced in a report.

    MINIMUM, MEDIUM and FULL select increasingly large flattened field sets.
    RAW bypasses projection and keeps the alert exactly as the API returned it.
    """

    MINIMUM = "minimum"
    MEDIUM = "medium"
    FULL = "full"
    RAW = "raw"


@dataclass(frozen=True, slots=True)
class Rule:
    id: str
    severity: str
    description: str
    name: str


@dataclass(frozen=True, slots=True)
class Location:
    path: str
    start_line: int
    end_line: int
    start_column: int
    end_column: int


@dataclass(frozen=True, slots=True)
class AlertInstance:
    """The most recent occurrence of an alert on the analyzed ref."""

    ref: str
    analysis_key: str
    category: str
    state: str
    commit_sha: str
    message_text: str
    location: Location


@dataclass(frozen=True, slots=True)
class Tool:
    name: str
    version: str | None


@dataclass(frozen=True, slots=True)
class CodeScanningAlert:
    """A code scanning alert as returned by the GitHub API.

    The original API payload is retained in ``payload`` so the alert can be
    dumped without losing fields the typed model does not cover.
    """

    number: int
    rule: Rule
    most_recent_instance: AlertInstance
    tool: Tool
    help: str | None = None
    payload: dict[str, Any] | None = field(default=None, compare=False, repr=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CodeScanningAlert":
        """Build an alert from a code scanning API response body.

        Raises:
            KeyError: If a required nested field is missing.
        """
        rule = data["rule"]
        instance = data["most_recent_instance"]
        location = instance["location"]
        tool = data["tool"]

        return cls(
            number=data["number"],
            rule=Rule(
                id=rule["id"],
                severity=rule["severity"],
                description=rule["description"],
                name=rule["name"],
            ),
            most_recent_instance=AlertInstance(
                ref=instance["ref"],
                analysis_key=instance["analysis_key"],
                category=instance["category"],
                state=instance["state"],
                commit_sha=instance["commit_sha"],
                message_text=instance["message"]["text"],
                location=Location(
                    path=location["path"],
                    start_line=location["start_line"],
                    end_line=location["end_line"],
                    start_column=location["start_column"],
                    end_column=location["end_column"],
                ),
            ),
            tool=Tool(name=tool["name"], version=tool.get("version")),
            help=data.get("help"),
            payload=data,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the unprocessed record, rebuilding it when no payload was kept."""
        if self.payload is not None:
            return dict(self.payload)

        instance = self.most_recent_instance
        data: dict[str, Any] = {
            "number": self.number,
            "rule": asdict(self.rule),
            "most_recent_instance": {
                "ref": instance.ref,
                "analysis_key": instance.analysis_key,
                "category": instance.category,
                "state": instance.state,
                "commit_sha": instance.commit_sha,
                "message": {"text": instance.message_text},
                "location": asdict(instance.location),
            },
        }
        if self.help is not None:
            data["help"] = self.help
        data["tool"] = asdict(self.tool)
        return data


@dataclass(frozen=True, slots=True)
class MinimumAlert:
    """Flattened alert with the essentials. Every level carries the commit."""

    level: ClassVar[DetailLevel] = DetailLevel.MINIMUM

    number: int
    rule_id: str
    rule_name: str
    severity: str
    message: str
    file_path: str
    start_line: int
    end_line: int
    commit_sha: str

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class MediumAlert(MinimumAlert):
    level: ClassVar[DetailLevel] = DetailLevel.MEDIUM

    rule_description: str
    start_column: int
    end_column: int
    state: str


@dataclass(frozen=True, slots=True)
class FullAlert(MediumAlert):
    level: ClassVar[DetailLevel] = DetailLevel.FULL

    ref: str
    analysis_key: str
    category: str
    tool_name: str
    tool_version: str | None
    help_text: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        if self.help_text is None:
            del data["help_text"]
        return data


ProjectedAlert = MinimumAlert | MediumAlert | FullAlert
