from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Sequence

from jsonschema import Draft7Validator

OUTPUT_FORMATS = ["table", "plain", "json"]


@dataclass(slots=True)
class ValidationIssue:
    """Represents a single validation problem."""

    severity: str
    path: str
    message: str
    code: str

    def describe(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass(slots=True)
class ValidationReport:
    """Aggregates validation warnings and errors."""

    errors: List[ValidationIssue] = field(default_factory=list)
    warnings: List[ValidationIssue] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


CONFIG_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "settings": {
            "type": ["object", "null"],
            "properties": {
                "format": {"type": "string", "enum": OUTPUT_FORMATS},
                "show_progress": {"type": "boolean"},
                "verbose": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
        "inputs": {
            "type": ["array", "null"],
            "items": {"type": "string"},
        },
        "input_list": {"type": ["string", "null"]},
    },
    "additionalProperties": False,
}


def _format_jsonschema_path(path: Sequence[Any]) -> str:
    if not path:
        return "<root>"
    tokens: List[str] = []
    for part in path:
        if isinstance(part, int):
            if tokens:
                tokens[-1] = f"{tokens[-1]}[{part}]"
            else:
                tokens.append(f"[{part}]")
        else:
            tokens.append(str(part))
    return ".".join(tokens) if tokens else "<root>"


def validate_config_data(data: Dict[str, Any]) -> ValidationReport:
    """Validate configuration data against the schema and semantic rules.

    Args:
        data: Parsed YAML configuration

    Returns:
        ValidationReport containing any errors or warnings found
    """
    report = ValidationReport()
    validator = Draft7Validator(CONFIG_SCHEMA)

    for error in sorted(validator.iter_errors(data), key=lambda exc: _format_jsonschema_path(exc.absolute_path)):
        report.errors.append(
            ValidationIssue(
                severity="error",
                path=_format_jsonschema_path(error.absolute_path),
                message=error.message,
                code="schema",
            )
        )

    if report.is_valid:
        _validate_semantics(data, report)
    return report


def _validate_semantics(data: Dict[str, Any], report: ValidationReport) -> None:
    input_list = data.get("input_list")
    if isinstance(input_list, str) and not input_list.strip():
        report.errors.append(
            ValidationIssue(
                severity="error",
                path="input_list",
                message="Input list path must not be blank",
                code="input-list",
            )
        )

    for index, entry in enumerate(data.get("inputs") or []):
        if not entry.strip():
            report.warnings.append(
                ValidationIssue(
                    severity="warning",
                    path=f"inputs[{index}]",
                    message="Blank filename will be classified as Miscellaneous",
                    code="blank-input",
                )
            )
