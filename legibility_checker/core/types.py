"""Shared types for legibility-tool: decisions, advisories, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class LogoColors:
    """Brand logo colours as extracted upstream. Only colour validity is checked."""

    primary: str
    secondary: str
    accent: tuple[str, ...] = ()


@dataclass(frozen=True)
class ContrastDecision:
    """The guaranteed-legible foreground for one backdrop."""

    suggested_text_color: str
    contrast_ratio: float = 0.0  # achieved ratio against the backdrop
    unsuitable_colors: tuple[str, ...] = ()  # probe swatches that fail on the backdrop

    def to_dict(self) -> dict[str, Any]:
        return {
            'suggestedTextColor': self.suggested_text_color,
            'contrastRatio': round(self.contrast_ratio, 2),
            'unsuitableColors': list(self.unsuitable_colors),
        }


@dataclass(frozen=True)
class LogoEffect:
    """CSS for a logo backing plate. All None means render the logo unmodified."""

    background: str | None = None
    border: str | None = None
    shadow: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        return {'background': self.background, 'border': self.border, 'shadow': self.shadow}


@dataclass(frozen=True)
class LegibilityAdvisory:
    """A recommendation, not a mandate. The caller decides whether to apply it."""

    needs_enhancement: bool = False
    suggested_gradient: str | None = None
    suggested_logo_effect: LogoEffect = field(default_factory=LogoEffect)

    def to_dict(self) -> dict[str, Any]:
        return {
            'needsEnhancement': self.needs_enhancement,
            'suggestedGradient': self.suggested_gradient,
            'suggestedLogoEffect': self.suggested_logo_effect.to_dict(),
        }


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='ratio', help='Contrast ratio between two colours')

        @command.arguments
        def arguments(parser):
            parser.add_argument('first')

        @command.run
        def run(args, report):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the function adding positional arguments."""
        self._args_fn = fn
        return fn

    def configure(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, args: Any, report: Report) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report)


@dataclass
class Report:
    """Accumulates results from a command for text/JSON output."""

    command: str = ''
    min_ratio: float = 4.5
    subjects: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0
    checked: list[tuple[str, float]] = field(default_factory=list)  # unrounded, for --fail-under

    def add(self, subject: str, section: str, data: dict[str, Any]) -> None:
        """Add a result section for a subject (text, footer, logo, ...)."""
        if subject not in self.subjects:
            self.subjects[subject] = {}
        self.subjects[subject][section] = data

    def record(self, subject: str, ratio: float) -> None:
        """Count a contrast ratio as pass/fail against the report's minimum."""
        self.checked.append((subject, ratio))
        if ratio >= self.min_ratio:
            self.record_pass(subject)
        else:
            self.record_fail(subject)

    def record_pass(self, subject: str) -> None:
        self.pass_count += 1

    def record_fail(self, subject: str) -> None:
        self.fail_count += 1

    def ratios(self) -> list[tuple[str, float]]:
        """Every (subject, ratio) pair passed to record(), unrounded."""
        return list(self.checked)
