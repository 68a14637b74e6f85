# cssbuilder/core/definition_loader.py
from __future__ import annotations

"""Selector definition schema and loader
----------------------------------------
Pydantic models for selectors declared in YAML (multi-doc files allowed),
plus helpers that build and render them through the selector builder so
the same ordering and uniqueness rules apply as for chained calls.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union
import os
import re

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from cssbuilder.selectors import Combinator, Selector, SimpleSelector, css_selector_builder
from cssbuilder.utils.logger import get_logger, log_with_context

log = get_logger(__name__)


# ---------- Helpers ----------


def _strip_non_empty(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("fragment value cannot be empty")
    return v


_ENV_REF = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def _subst_env(obj):
    """Replace ${VAR} in every string with the environment value (unknown vars are left as-is)."""
    if isinstance(obj, str):
        return _ENV_REF.sub(lambda m: os.environ.get(m.group(1), m.group(0)), obj)
    if isinstance(obj, list):
        return [_subst_env(x) for x in obj]
    if isinstance(obj, dict):
        return {k: _subst_env(v) for k, v in obj.items()}
    return obj


def _format_validation_error(header: str, ve: ValidationError) -> str:
    lines = [header]
    for e in ve.errors():
        loc = ".".join(str(p) for p in e.get("loc", []))
        msg = e.get("msg", "invalid value")
        lines.append(f"  - {loc}: {msg}")
    return "\n".join(lines)


# ---------- Fragment models ----------


class FragmentKind(str, Enum):
    element = "element"
    id = "id"
    class_ = "class"
    attr = "attr"
    pseudo_class = "pseudo_class"
    pseudo_element = "pseudo_element"


class FragmentStep(BaseModel):
    """One chained call, e.g. {kind: class, value: container}."""
    model_config = ConfigDict(extra="forbid")

    kind: FragmentKind
    value: str

    value_non_empty = field_validator("value")(_strip_non_empty)


class SimpleSelectorDef(BaseModel):
    """
    Either the mapping form (fields in canonical order) or an explicit
    `fragments` list applied in the written order.
    """
    model_config = ConfigDict(extra="forbid")

    element: Optional[str] = None
    id: Optional[str] = None
    classes: list[str] = Field(default_factory=list)
    attrs: list[str] = Field(default_factory=list, description="Raw attribute expressions, written inside [...]")
    pseudo_classes: list[str] = Field(default_factory=list)
    pseudo_element: Optional[str] = None
    fragments: list[FragmentStep] = Field(default_factory=list)

    @field_validator("element", "id", "pseudo_element")
    @classmethod
    def _single_non_empty(cls, v: Optional[str]) -> Optional[str]:
        return None if v is None else _strip_non_empty(v)

    @field_validator("classes", "attrs", "pseudo_classes")
    @classmethod
    def _list_non_empty(cls, v: list[str]) -> list[str]:
        return [_strip_non_empty(x) for x in v]

    @model_validator(mode="after")
    def _has_fragments(self) -> "SimpleSelectorDef":
        mapped = [self.element, self.id, self.classes, self.attrs, self.pseudo_classes, self.pseudo_element]
        uses_mapping = any(mapped)
        if self.fragments and uses_mapping:
            raise ValueError("use either `fragments` or the element/id/classes/... fields, not both")
        if not self.fragments and not uses_mapping:
            raise ValueError("selector needs at least one fragment")
        return self

    def steps(self) -> list[FragmentStep]:
        if self.fragments:
            return list(self.fragments)
        out: list[FragmentStep] = []
        if self.element is not None:
            out.append(FragmentStep(kind=FragmentKind.element, value=self.element))
        if self.id is not None:
            out.append(FragmentStep(kind=FragmentKind.id, value=self.id))
        out.extend(FragmentStep(kind=FragmentKind.class_, value=v) for v in self.classes)
        out.extend(FragmentStep(kind=FragmentKind.attr, value=v) for v in self.attrs)
        out.extend(FragmentStep(kind=FragmentKind.pseudo_class, value=v) for v in self.pseudo_classes)
        if self.pseudo_element is not None:
            out.append(FragmentStep(kind=FragmentKind.pseudo_element, value=self.pseudo_element))
        return out


class CombinedSelectorDef(BaseModel):
    model_config = ConfigDict(extra="forbid")

    left: SelectorDef
    combinator: Combinator
    right: SelectorDef


SelectorDef = Union[CombinedSelectorDef, SimpleSelectorDef]

CombinedSelectorDef.model_rebuild()


class SelectorDocument(BaseModel):
    name: str = Field(..., description="Identifier printed next to the rendered selector")
    description: Optional[str] = None
    tags: list[str] = Field(default_factory=list)
    selector: SelectorDef

    @field_validator("name")
    @classmethod
    def _name_non_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name cannot be empty")
        return v


# ---------- Building ----------


_APPLY = {
    FragmentKind.element: SimpleSelector.element,
    FragmentKind.id: SimpleSelector.id,
    FragmentKind.class_: SimpleSelector.class_,
    FragmentKind.attr: SimpleSelector.attr,
    FragmentKind.pseudo_class: SimpleSelector.pseudo_class,
    FragmentKind.pseudo_element: SimpleSelector.pseudo_element,
}

_START = {
    FragmentKind.element: css_selector_builder.element,
    FragmentKind.id: css_selector_builder.id,
    FragmentKind.class_: css_selector_builder.class_,
    FragmentKind.attr: css_selector_builder.attr,
    FragmentKind.pseudo_class: css_selector_builder.pseudo_class,
    FragmentKind.pseudo_element: css_selector_builder.pseudo_element,
}


def build_selector(defn: SelectorDef) -> Selector:
    """
    Turn a validated definition into a selector via the builder facade.
    Raises SelectorBuildError subclasses when `fragments` are out of order or repeated.
    """
    if isinstance(defn, CombinedSelectorDef):
        return css_selector_builder.combine(build_selector(defn.left), defn.combinator, build_selector(defn.right))

    first, *rest = defn.steps()
    sel = _START[first.kind](first.value)
    for step in rest:
        _APPLY[step.kind](sel, step.value)
    return sel


@dataclass
class RenderedSelector:
    name: str
    text: str
    source: Optional[str] = None


def render_document(doc: SelectorDocument, source: Optional[Path] = None) -> RenderedSelector:
    doc_log = log_with_context(log, document=doc.name)
    sel = build_selector(doc.selector)
    text = sel.stringify()
    doc_log.debug(f"rendered {doc.name}: {text!r}")
    return RenderedSelector(name=doc.name, text=text, source=str(source) if source else None)


# ---------- Loading ----------


def load_definitions_file(path: Path | str) -> list[SelectorDocument]:
    """Load one or more selector documents from a YAML file (supports multi-document)."""
    def_path = Path(path)
    if not def_path.exists():
        raise FileNotFoundError(f"Selector definition file not found: {def_path}")
    try:
        raw = def_path.read_text(encoding="utf-8")
        docs = list(yaml.safe_load_all(raw))
    except yaml.YAMLError as ye:
        raise ValueError(f"YAML parse error in {def_path}: {ye}") from ye

    out: list[SelectorDocument] = []
    for idx, data in enumerate(docs, start=1):
        if data is None:
            continue
        if not isinstance(data, dict):
            raise ValueError(f"Document {idx} in {def_path} must be a mapping/object.")
        try:
            out.append(SelectorDocument.model_validate(_subst_env(data)))
        except ValidationError as ve:
            raise ValueError(
                _format_validation_error(f"Invalid selector definition '{def_path}' (document {idx}):", ve)
            ) from ve
    if not out:
        raise ValueError(f"No selector documents found in {def_path}")
    log.debug(f"loaded {len(out)} document(s) from {def_path}")
    return out


def find_definition_files(root: Path, recursive: bool = True) -> list[Path]:
    if recursive:
        return sorted(list(root.rglob("*.yaml")) + list(root.rglob("*.yml")))
    return sorted(list(root.glob("*.yaml")) + list(root.glob("*.yml")))


class DefinitionLoader:
    def load_directory(
        self,
        root: Path,
        *,
        recursive: bool = True,
        tag: Optional[str] = None,
    ) -> list[SelectorDocument]:
        """Load every valid document under `root`; invalid files are logged and skipped."""
        documents: list[SelectorDocument] = []
        for fp in find_definition_files(root, recursive=recursive):
            try:
                docs = load_definitions_file(fp)
            except ValueError as e:
                log.warning(f"skipping {fp}: {e}")
                continue
            documents.extend(d for d in docs if tag is None or tag in d.tags)
        return documents


__all__ = [
    "FragmentKind",
    "FragmentStep",
    "SimpleSelectorDef",
    "CombinedSelectorDef",
    "SelectorDef",
    "SelectorDocument",
    "RenderedSelector",
    "build_selector",
    "render_document",
    "load_definitions_file",
    "find_definition_files",
    "DefinitionLoader",
]
