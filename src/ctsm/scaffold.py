"""TypeScript library scaffolding."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from . import git
from .config import ProjectConfig
from .license import mit
from .process import Runner, run_command
from .template import dedent, to_json

__all__ = ["DEV_DEPENDENCIES", "ProjectScaffolder"]


LOGGER = logging.getLogger(__name__)

DEV_DEPENDENCIES = ("prettier", "typescript", "tsup")

TSUP_CONFIG = {
    "entry": ["./src/index.ts"],
    "format": ["esm", "cjs"],
    "clean": True,
    "dts": True,
    "splitting": True,
    "treeshake": True,
}

PRETTIER_CONFIG = {
    "$schema": "http://json.schemastore.org/prettierrc",
    "singleQuote": True,
    "semi": True,
    "printWidth": 100,
    "trailingComma": "all",
    "arrowParens": "avoid",
    "bracketSpacing": False,
    "useTabs": True,
    "quoteProps": "consistent",
}

TSCONFIG = {
    "compilerOptions": {
        "target": "ESNext",
        "lib": ["DOM", "DOM.Iterable", "ESNext"],
        "allowJs": True,
        "skipLibCheck": True,
        "strict": True,
        "forceConsistentCasingInFileNames": True,
        "module": "ESNext",
        "moduleResolution": "bundler",
        "resolveJsonModule": True,
        "isolatedModules": True,
        "noEmit": True,
        "allowImportingTsExtensions": True,
        "jsx": "react-jsx",
    },
    "exclude": ["node_modules", "dist"],
    "include": ["**/*.ts", "**/*.tsx"],
}

INDEX_TEMPLATE = """
    export function add(a: number, b: number) {
        return a + b;
    }
"""

GITIGNORE_TEMPLATE = """
    node_modules
    dist
    bun.lockb
    .DS_Store
    .idea
    .vscode
"""


def _manifest(config: ProjectConfig, user: Mapping[str, str]) -> dict[str, Any]:
    manager = config.package_manager
    manifest: dict[str, Any] = {
        "name": config.module_name,
        "version": "0.0.1",
        "description": "Description",
        "keywords": [],
    }
    if user.get("name"):
        author = {"name": user["name"]}
        if user.get("email"):
            author["email"] = user["email"]
        manifest["author"] = author
    manifest.update(
        {
            "license": "MIT",
            "type": "module",
            "scripts": {
                "build": manager.build_script,
                "release": manager.release_script,
            },
            "exports": {
                "./package.json": "./package.json",
                ".": {
                    "import": "./dist/index.js",
                    "require": "./dist/index.cjs",
                },
            },
            "files": ["LICENSE", "README.md", "dist"],
        }
    )
    return manifest


def _tsup_config() -> str:
    return "\n".join(
        [
            "import {defineConfig} from 'tsup';",
            "",
            f"export default defineConfig({to_json(TSUP_CONFIG)});",
        ]
    )


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if not content.endswith("\n"):
        content += "\n"
    path.write_text(content, encoding="utf-8")
    LOGGER.debug("Wrote %s", path)


@dataclass(slots=True)
class ProjectScaffolder:
    """Create a TypeScript library skeleton and bootstrap its tooling."""

    runner: Runner

    def __init__(self, runner: Runner | None = None) -> None:
        self.runner = runner or run_command

    def files(self, config: ProjectConfig, user: Mapping[str, str]) -> dict[str, str]:
        """Return the generated files keyed by path relative to the project root."""

        return {
            "package.json": to_json(_manifest(config, user)),
            "tsup.config.ts": _tsup_config(),
            ".prettierrc": to_json(PRETTIER_CONFIG),
            "tsconfig.json": to_json(TSCONFIG),
            "LICENSE": mit(user.get("name")),
            "src/index.ts": dedent(INDEX_TEMPLATE),
            ".gitignore": dedent(GITIGNORE_TEMPLATE),
        }

    async def write(self, directory: str | Path, files: Mapping[str, str]) -> Path:
        """Write ``files`` below ``directory`` concurrently.

        The first failing write propagates; files already written stay on disk.
        """

        target = Path(directory)
        await asyncio.gather(
            *(
                asyncio.to_thread(_write_file, target / relative_path, content)
                for relative_path, content in files.items()
            )
        )
        return target

    async def install(self, config: ProjectConfig) -> None:
        command = config.package_manager.install_command(DEV_DEPENDENCIES, dev=True)
        await self.runner(command, cwd=config.directory)

    async def create(self, config: ProjectConfig, user: Mapping[str, str]) -> Path:
        """Write the project described by ``config``, install tooling, and ``git init``."""

        target = await self.write(config.directory, self.files(config, user))
        await self.install(config)
        await git.init_repository(target, runner=self.runner)
        return target
