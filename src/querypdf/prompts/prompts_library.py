import logging
from pathlib import Path

import yaml

from .prompt import Prompt

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

PromptKey = tuple[str, str]


class PromptsLibrary:
    """Versioned prompt templates read from a directory of YAML files.

    Defaults to the templates bundled with the package. Lookups are by
    ``(name, version)``; two files declaring the same pair is an error.
    """

    def __init__(self, directory: str | Path = TEMPLATES_DIR) -> None:
        self._directory = Path(directory)
        self._prompts: dict[PromptKey, Prompt] = {}
        for file_path in sorted(self._directory.glob("*.yaml")):
            self._add(self._read(file_path), file_path)
        logger.info(
            "Loaded %d prompts from %s", len(self._prompts), self._directory
        )

    def get(self, name: str, version: str) -> Prompt:
        prompt = self._prompts.get((name, version))
        if prompt is None:
            logger.error("Prompt not found: name=%s, version=%s", name, version)
            raise KeyError(f"Prompt '{name}' version '{version}' not found")
        return prompt

    def render(self, name: str, version: str, **values: str) -> str:
        return self.get(name, version).render(**values)

    def list(self) -> list[PromptKey]:
        return list(self._prompts)

    def _add(self, prompt: Prompt, source: Path) -> None:
        key = (prompt.name, prompt.version)
        if key in self._prompts:
            raise ValueError(
                f"Duplicate prompt '{prompt.name}' version '{prompt.version}' in {source}"
            )
        self._prompts[key] = prompt
        logger.debug("Loaded prompt %s v%s from %s", *key, source.name)

    @staticmethod
    def _read(file_path: Path) -> Prompt:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
        return Prompt(**data)
