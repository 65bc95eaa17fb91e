"""Structural validation of Spec documents."""

from dataclasses import dataclass, field
from typing import Any, Literal, Mapping

from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure, Result, Success

from .core.config import get_settings
from .core.errors import ValidationError
from .core.logging_config import get_logger
from .spec import Spec, SpecModel

logger = get_logger(__name__)

Severity = Literal["error", "warning"]

# Reserved fields that must live on the element, not inside props
_ELEMENT_LEVEL_FIELDS = ("visible", "on", "repeat", "watch")


@dataclass(frozen=True)
class SpecIssue:
    """A single problem found in a Spec."""

    code: str
    message: str
    severity: Severity = "error"
    element_key: str | None = None


@dataclass(frozen=True)
class SpecValidationResult:
    """Outcome of validating a Spec."""

    issues: list[SpecIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not any(issue.severity == "error" for issue in self.issues)

    @property
    def errors(self) -> list[SpecIssue]:
        return [issue for issue in self.issues if issue.severity == "error"]


class SpecValidator:
    """Validates Spec documents produced by render() or loaded from JSON."""

    def __init__(self, check_orphans: bool | None = None):
        if check_orphans is None:
            check_orphans = get_settings().check_orphans
        self.check_orphans = check_orphans

    def check(self, spec: Mapping[str, Any]) -> SpecValidationResult:
        """
        Collect every issue in a Spec.

        Args:
            spec: Spec mapping

        Returns:
            SpecValidationResult listing all issues found
        """
        try:
            model = SpecModel.model_validate(spec)
        except PydanticValidationError as e:
            logger.warning("invalid_spec_structure", errors=e.error_count())
            return SpecValidationResult(
                [SpecIssue("invalid_structure", f"Spec does not match the expected shape: {e}")]
            )

        issues: list[SpecIssue] = []

        if not model.root:
            issues.append(SpecIssue("empty_spec", "Spec has no root element"))
        elif model.root not in model.elements:
            issues.append(
                SpecIssue(
                    "root_not_found",
                    f'Root element "{model.root}" not found in elements',
                    element_key=model.root,
                )
            )

        for key, element in model.elements.items():
            for child_key in element.children or []:
                if child_key not in model.elements:
                    issues.append(
                        SpecIssue(
                            "missing_child",
                            f'Element "{key}" references missing child "{child_key}"',
                            element_key=key,
                        )
                    )

            for name in _ELEMENT_LEVEL_FIELDS:
                if name in element.props:
                    issues.append(
                        SpecIssue(
                            f"{name}_in_props",
                            f'Element "{key}" has "{name}" inside props; it belongs on the element',
                            element_key=key,
                        )
                    )

        if self.check_orphans and model.root in model.elements:
            reachable = _reachable(model, model.root)
            for key in model.elements:
                if key not in reachable:
                    issues.append(
                        SpecIssue(
                            "orphaned_element",
                            f'Element "{key}" is not reachable from root',
                            severity="warning",
                            element_key=key,
                        )
                    )

        return SpecValidationResult(issues)

    def validate(self, spec: Mapping[str, Any]) -> None:
        """
        Validate a Spec strictly.

        Raises:
            ValidationError: On the first error-severity issue
        """
        result = self.check(spec)
        if not result.valid:
            first = result.errors[0]
            logger.error("spec_invalid", code=first.code, element=first.element_key)
            raise ValidationError(first.message)


def _reachable(model: SpecModel, root: str) -> set[str]:
    seen: set[str] = set()
    stack = [root]
    while stack:
        key = stack.pop()
        if key in seen or key not in model.elements:
            continue
        seen.add(key)
        stack.extend(model.elements[key].children or [])
    return seen


def validate_spec(spec: Mapping[str, Any], check_orphans: bool | None = None) -> SpecValidationResult:
    """
    Validate a Spec and report all issues.

    Args:
        spec: Spec mapping
        check_orphans: Report unreachable elements; defaults to settings

    Returns:
        SpecValidationResult
    """
    return SpecValidator(check_orphans).check(spec)


def check_spec(spec: Spec) -> Result[Spec, SpecValidationResult]:
    """
    Validate a Spec (Result pattern version).

    Returns:
        Success with the spec, or Failure with the validation result
    """
    result = validate_spec(spec)
    if result.valid:
        return Success(spec)
    return Failure(result)
