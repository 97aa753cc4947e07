"""Project files that hold the two question banks of an interview group."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

QUESTION_COUNT = 30
SIMPLE_LABEL = "简单题"
DIFFICULT_LABEL = "困难题"
PROJECT_SUFFIX = ".txt"
DEFAULT_ROOT = "project"


class StoreError(Exception):
    """Raised when a project file cannot be created, read, written or removed."""


def _full_bank() -> list[int]:
    return list(range(1, QUESTION_COUNT + 1))


@dataclass
class QuestionBanks:
    """Both banks of a group.

    Position ``n - 1`` holds ``n`` while question ``n`` can still be drawn
    and ``0`` once it has been drawn or removed.
    """

    simple: list[int] = field(default_factory=_full_bank)
    difficult: list[int] = field(default_factory=_full_bank)

    def __post_init__(self) -> None:
        self.simple = list(self.simple)
        self.difficult = list(self.difficult)
        for values in (self.simple, self.difficult):
            if len(values) != QUESTION_COUNT:
                raise ValueError(
                    f"a bank holds exactly {QUESTION_COUNT} entries, got {len(values)}"
                )

    @classmethod
    def fresh(cls) -> "QuestionBanks":
        """Return banks with every question available."""
        return cls(_full_bank(), _full_bank())


def format_bank_line(label: str, values: Iterable[int]) -> str:
    """Render a bank as the label followed by comma-separated values."""
    return label + "".join(f",{value}" for value in values)


def _to_int(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def parse_bank_line(line: str) -> list[int]:
    """Read the values of a bank line; fields that are not numbers read as 0."""
    fields = line.split(",")
    if len(fields) <= QUESTION_COUNT:
        raise StoreError(
            f"bank line needs {QUESTION_COUNT} values, found {len(fields) - 1}"
        )
    return [_to_int(text) for text in fields[1 : QUESTION_COUNT + 1]]


def _fresh_content(name: str) -> str:
    banks = QuestionBanks.fresh()
    return "\n".join(
        [
            name,
            format_bank_line(SIMPLE_LABEL, banks.simple),
            format_bank_line(DIFFICULT_LABEL, banks.difficult),
        ]
    )


class ProjectStore:
    """A folder of ``<group>.txt`` files, one per interview group."""

    def __init__(self, root: str | Path = DEFAULT_ROOT) -> None:
        self.root = Path(root)

    def path_for(self, name: str) -> Path:
        return self.root / f"{name}{PROJECT_SUFFIX}"

    def _ensure_root(self) -> None:
        try:
            self.root.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise StoreError(f"cannot create project folder {self.root}") from exc

    def _project_files(self) -> list[Path]:
        if not self.root.is_dir():
            return []
        files = (
            path
            for path in self.root.iterdir()
            if path.is_file()
            and not path.name.startswith(".")
            and path.name.lower().endswith(PROJECT_SUFFIX)
        )
        return sorted(files, key=lambda path: path.name.lower())

    def list_projects(self) -> list[str]:
        """Return the group names, creating the folder when it is missing."""
        self._ensure_root()
        return [path.name.split(".", 1)[0] for path in self._project_files()]

    def _write_fresh(self, name: str) -> None:
        try:
            with self.path_for(name).open("w", encoding="utf-8") as handle:
                handle.write(_fresh_content(name))
        except OSError as exc:
            raise StoreError(f"cannot write project {name!r}") from exc

    def add(self, name: str) -> None:
        """Create a group with both banks full."""
        if not name:
            raise StoreError("project name must not be empty")
        self._ensure_root()
        self._write_fresh(name)

    def delete(self, name: str) -> None:
        try:
            self.path_for(name).unlink()
        except OSError as exc:
            raise StoreError(f"cannot delete project {name!r}") from exc

    def _for_every_project(self, action) -> None:
        failed = []
        for path in self._project_files():
            name = path.name[: -len(PROJECT_SUFFIX)]
            try:
                action(name)
            except StoreError:
                failed.append(name)
        if failed:
            raise StoreError(f"failed for projects: {', '.join(failed)}")

    def delete_all(self) -> None:
        """Delete every group, trying all of them before reporting failures."""
        self._for_every_project(self.delete)

    def reset(self, name: str) -> None:
        """Make every question of the group available again."""
        self._write_fresh(name)

    def reset_all(self) -> None:
        self._for_every_project(self.reset)

    def _read_lines(self, name: str) -> list[str]:
        try:
            text = self.path_for(name).read_text(encoding="utf-8")
        except OSError as exc:
            raise StoreError(f"cannot read project {name!r}") from exc
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def load_banks(self, name: str) -> QuestionBanks:
        lines = self._read_lines(name)
        if len(lines) < 3:
            raise StoreError(f"project {name!r} has no question banks")
        return QuestionBanks(parse_bank_line(lines[1]), parse_bank_line(lines[2]))

    def save_banks(self, name: str, banks: QuestionBanks) -> None:
        """Replace the bank lines of an existing group, keeping the other lines."""
        lines = self._read_lines(name)
        if len(lines) >= 2:
            lines[1] = format_bank_line(SIMPLE_LABEL, banks.simple)
        if len(lines) >= 3:
            lines[2] = format_bank_line(DIFFICULT_LABEL, banks.difficult)
        try:
            with self.path_for(name).open("w", encoding="utf-8") as handle:
                handle.write("".join(f"{line}\n" for line in lines))
        except OSError as exc:
            raise StoreError(f"cannot write project {name!r}") from exc