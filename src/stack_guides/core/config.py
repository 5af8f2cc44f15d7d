"""Static stack table and build configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from stack_guides.model import GUIDE_EXTENSION, README_NAME


@dataclass(frozen=True)
class StackConfig:
    """One statically configured stack.

    ``id`` is fixed here and never derived from ``directory``.
    """

    id: str
    name: str
    directory: str
    icon: str = ""
    summary: str = ""
    focus: str = ""


DEFAULT_STACKS: tuple[StackConfig, ...] = (
    StackConfig(
        id="typescript",
        name="TypeScript",
        directory="Typescript",
        icon="icons/typescript.png",
        summary="Type-safe JavaScript development",
        focus="Type safety, code quality, best practices",
    ),
    StackConfig(
        id="python",
        name="Python",
        directory="Python",
        icon="icons/python.png",
        summary="General Python development",
        focus="Type safety, readability, best practices",
    ),
    StackConfig(
        id="rust",
        name="Rust",
        directory="Rust",
        icon="icons/rust.png",
        summary="Systems programming with Rust",
        focus="Memory safety, performance, zero-cost abstractions",
    ),
    StackConfig(
        id="arduino-platformio",
        name="Arduino + PlatformIO",
        directory="Arduino + PlatformIO",
        icon="icons/arduino.png",
        summary="Embedded systems & microcontrollers",
        focus="Hardware abstraction, memory management, interrupts, safety",
    ),
    StackConfig(
        id="python-fastapi",
        name="Python + FastAPI",
        directory="Python + FastAPI",
        icon="icons/fastapi.png",
        summary="Backend API development with FastAPI",
        focus="Async APIs, validation, security, testing",
    ),
    StackConfig(
        id="solidity-foundry",
        name="Solidity + Foundry",
        directory="solidity + foundry",
        icon="icons/solidity.png",
        summary="Smart contract engineering with Foundry",
        focus="Security-first, gas efficiency, upgradeability",
    ),
    StackConfig(
        id="typescript-react-nextjs",
        name="TypeScript-React + Nextjs",
        directory="Typescript-React + Nextjs",
        icon="icons/nextjs.png",
        summary="Full-stack web development with Next.js",
        focus="React patterns, accessibility, performance",
    ),
)


@dataclass(frozen=True)
class BuildConfig:
    """Immutable build configuration.

    All paths are relative to ``repo_root`` unless absolute.
    """

    repo_root: Path = field(default_factory=lambda: Path("."))
    docs_dir: Path = Path("docs")
    out_path: Path = Path("docs/data/guides.json")
    rules_subdir: Path = Path(".cursor/rules")
    guide_extension: str = GUIDE_EXTENSION
    readme_name: str = README_NAME

    def resolve(self, path: Path) -> Path:
        return path if path.is_absolute() else self.repo_root / path

    @property
    def snapshot_path(self) -> Path:
        return self.resolve(self.out_path)
