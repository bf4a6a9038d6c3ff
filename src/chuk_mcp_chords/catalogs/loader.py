"""
Catalog loader - reads voicing and suggestion catalogs from YAML.

Catalogs can come from:
1. Built-in library (shipped with package)
2. Project catalogs (user's project/catalogs directory)

Project entries replace library entries per root/quality (voicings) or
per style (suggestions).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from chuk_mcp_chords.errors import CatalogError
from chuk_mcp_chords.models.catalog import (
    ChordShapeCatalog,
    StyleRules,
    SuggestionRule,
    SuggestionRuleCatalog,
)

logger = logging.getLogger(__name__)

VOICINGS_FILE = "voicings.yaml"
SUGGESTIONS_FILE = "suggestions.yaml"


def parse_shape_catalog(data: dict[str, Any]) -> ChordShapeCatalog:
    """
    Build a shape catalog from parsed YAML data.

    Raises:
        CatalogError: if the data does not describe a valid catalog
    """
    if not isinstance(data, dict):
        raise CatalogError("Voicing catalog must be a mapping")
    try:
        return ChordShapeCatalog(
            schema_version=data.get("schema", "voicings/v1"),
            chords=data.get("chords") or {},
        )
    except ValidationError as e:
        raise CatalogError(f"Invalid voicing catalog: {e}") from e


def parse_rule_catalog(data: dict[str, Any]) -> SuggestionRuleCatalog:
    """
    Build a suggestion rule catalog from parsed YAML data.

    Styles are a list so their order is the display order.

    Raises:
        CatalogError: if the data does not describe a valid catalog
    """
    if not isinstance(data, dict):
        raise CatalogError("Suggestion catalog must be a mapping")
    try:
        styles: dict[str, StyleRules] = {}
        style_list = data.get("styles") or []
        if not isinstance(style_list, list):
            raise CatalogError("Suggestion styles must be a list")
        for style_data in style_list:
            if not isinstance(style_data, dict):
                raise CatalogError(f"Style entry must be a mapping, got {style_data!r}")
            rule_map = style_data.get("rules") or {}
            if not isinstance(rule_map, dict):
                raise CatalogError(f"Rules of style {style_data.get('name')!r} must be a mapping")
            rules = {
                family: [SuggestionRule(**rule) for rule in rule_list or []]
                for family, rule_list in rule_map.items()
            }
            style = StyleRules(
                name=style_data["name"],
                description=style_data.get("description", ""),
                rules=rules,
            )
            styles[style.name] = style
        return SuggestionRuleCatalog(
            schema_version=data.get("schema", "suggestions/v1"),
            styles=styles,
        )
    except (ValidationError, KeyError, TypeError) as e:
        raise CatalogError(f"Invalid suggestion catalog: {e}") from e


class CatalogLoader:
    """
    Loads the shape and suggestion catalogs.

    Both catalogs are cached after the first load; call clear_cache()
    after editing the files on disk.
    """

    def __init__(
        self,
        library_path: Path | None = None,
        project_path: Path | None = None,
    ):
        """
        Initialize the catalog loader.

        Args:
            library_path: Path to built-in catalog library
            project_path: Path to project catalogs directory
        """
        self.library_path = library_path or (Path(__file__).parent / "library")
        self.project_path = project_path
        self._shapes: ChordShapeCatalog | None = None
        self._rules: SuggestionRuleCatalog | None = None

    def load_shapes(self) -> ChordShapeCatalog:
        """Load the voicing catalog, library first, project on top."""
        if self._shapes is None:
            catalog = ChordShapeCatalog()
            for path in self._candidate_files(VOICINGS_FILE):
                data = self._read_yaml(path)
                if data is None:
                    continue
                try:
                    catalog = catalog.merged(parse_shape_catalog(data))
                except CatalogError as e:
                    logger.warning(f"Skipping voicing catalog {path}: {e}")
            logger.debug(f"Loaded voicings for {len(catalog.chords)} roots")
            self._shapes = catalog
        return self._shapes

    def load_rules(self) -> SuggestionRuleCatalog:
        """Load the suggestion catalog, library first, project on top."""
        if self._rules is None:
            catalog = SuggestionRuleCatalog()
            for path in self._candidate_files(SUGGESTIONS_FILE):
                data = self._read_yaml(path)
                if data is None:
                    continue
                try:
                    catalog = catalog.merged(parse_rule_catalog(data))
                except CatalogError as e:
                    logger.warning(f"Skipping suggestion catalog {path}: {e}")
            logger.debug(f"Loaded {len(catalog.styles)} suggestion styles")
            self._rules = catalog
        return self._rules

    def save_rules(self, catalog: SuggestionRuleCatalog) -> Path:
        """
        Write a suggestion catalog to the project directory.

        Returns:
            Path of the written file
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        self.project_path.mkdir(parents=True, exist_ok=True)
        path = self.project_path / SUGGESTIONS_FILE
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                catalog.to_yaml_dict(),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )

        self._rules = None
        return path

    def copy_style_to_project(self, name: str) -> Path | None:
        """
        Copy a library suggestion style into the project rules file.

        Styles already in the project file are kept.

        Args:
            name: Style name in the library catalog

        Returns:
            Path of the written file, or None if the library has no such style

        Raises:
            ValueError: if no project path is configured or the project
                already has the style
            CatalogError: if the existing project file cannot be parsed
        """
        if not self.project_path:
            raise ValueError("No project path configured")

        library_file = self.library_path / SUGGESTIONS_FILE
        data = self._read_yaml(library_file) if library_file.exists() else None
        style = parse_rule_catalog(data).get_style(name) if data is not None else None
        if style is None:
            return None

        project_file = self.project_path / SUGGESTIONS_FILE
        project = SuggestionRuleCatalog()
        if project_file.exists():
            project_data = self._read_yaml(project_file)
            if project_data is None:
                raise CatalogError(f"Cannot read project catalog {project_file}")
            project = parse_rule_catalog(project_data)

        if project.get_style(name) is not None:
            raise ValueError(f"Style already exists in project: {name}")

        logger.info(f"Copying style {name!r} to {project_file}")
        return self.save_rules(project.merged(SuggestionRuleCatalog(styles={name: style})))

    def _candidate_files(self, filename: str) -> list[Path]:
        paths = [self.library_path / filename]
        if self.project_path:
            paths.append(self.project_path / filename)
        return [path for path in paths if path.exists()]

    def _read_yaml(self, path: Path) -> dict[str, Any] | None:
        """Read a YAML file, logging and returning None if it cannot be parsed."""
        try:
            with open(path, encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Could not read catalog file {path}: {e}")
            return None

    def clear_cache(self) -> None:
        """Clear the catalog cache."""
        self._shapes = None
        self._rules = None
