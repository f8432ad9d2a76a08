"""
Design token flattening and reference resolution.

Nested token trees are flattened depth-first in insertion order. Each leaf
gets a hyphen-joined name built from its path below the layer key, so
``primitive.spacing.md`` becomes ``spacing-md``. A leaf is any non-mapping
value, or a reference node ``{"ref": "<path>"}``.

References resolve against the schema's own layers. A reference path is
tried, in order, as:

    1. an absolute path starting with a layer name ("primitive.color.blue")
    2. a sibling of the referring token's group ("md" from semantic.spacing.*)
    3. a path below the primitive layer ("color.blue.500")
    4. a path below the semantic layer ("color.primary")

Every reference must end at a primitive literal, directly or through a
chain of semantic references.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from .errors import make_token_error
from .ir.schema import TOKEN_LAYERS, TokenSystem

logger = logging.getLogger(__name__)

REF_KEY = "ref"


def is_reference(node: Any) -> bool:
    """Whether ``node`` is a reference node ``{"ref": "path"}``."""
    return (
        isinstance(node, Mapping)
        and len(node) == 1
        and REF_KEY in node
        and isinstance(node[REF_KEY], str)
    )


def iter_leaves(tree: Mapping[str, Any], prefix: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], Any]]:
    """Yield ``(path, value)`` for every leaf, depth-first, in insertion order."""
    for key, value in tree.items():
        path = (*prefix, str(key))
        if isinstance(value, Mapping) and not is_reference(value):
            yield from iter_leaves(value, path)
        else:
            yield path, value


def flatten_tokens(tree: Mapping[str, Any], prefix: tuple[str, ...] = ()) -> list[tuple[str, Any]]:
    """
    Flatten a nested token tree into ``(hyphen-name, value)`` pairs.

    Examples:
        >>> flatten_tokens({"spacing": {"md": "1rem"}, "color": {"blue": {"500": "#3b82f6"}}})
        [('spacing-md', '1rem'), ('color-blue-500', '#3b82f6')]
    """
    return [("-".join(path), value) for path, value in iter_leaves(tree, prefix)]


@dataclass(frozen=True)
class TokenEntry:
    """
    One flattened token.

    Attributes:
        layer: primitive, semantic or component
        path: Key path below the layer
        value: Raw leaf value (a reference node for references)
        ref: Reference path as written, or None for literals
        resolved: Final literal value after following references
        target: Dotted absolute path of the primitive the reference ends at
    """

    layer: str
    path: tuple[str, ...]
    value: Any
    ref: str | None
    resolved: Any
    target: str | None = None

    @property
    def name(self) -> str:
        return "-".join(self.path)

    @property
    def dotted(self) -> str:
        return ".".join((self.layer, *self.path))

    @property
    def is_reference(self) -> bool:
        return self.ref is not None


@dataclass(frozen=True)
class _RawLeaf:
    layer: str
    path: tuple[str, ...]
    value: Any


class _Resolver:
    """Follows reference chains over the raw leaves of a token system."""

    def __init__(self, leaves: list[_RawLeaf]):
        self._index: dict[str, _RawLeaf] = {".".join((leaf.layer, *leaf.path)): leaf for leaf in leaves}

    def lookup(self, ref: str, origin: _RawLeaf) -> _RawLeaf | None:
        head = ref.split(".", 1)[0]
        candidates: list[str] = []
        if head in TOKEN_LAYERS:
            candidates.append(ref)
        if origin.path:
            candidates.append(f"primitive.{origin.path[0]}.{ref}")
        candidates.append(f"primitive.{ref}")
        candidates.append(f"semantic.{ref}")
        for candidate in candidates:
            leaf = self._index.get(candidate)
            if leaf is not None and leaf is not origin:
                return leaf
        return None

    def resolve(self, leaf: _RawLeaf) -> tuple[Any, str | None]:
        """
        Return ``(literal, target_path)`` for a leaf.

        Raises:
            ValueError: Dangling reference, cycle, or chain ending outside primitives
        """
        seen: list[str] = []
        current = leaf
        while is_reference(current.value):
            dotted = ".".join((current.layer, *current.path))
            if dotted in seen:
                chain = " -> ".join([*seen, dotted])
                raise ValueError(f"cyclic reference {chain}")
            seen.append(dotted)
            ref = current.value[REF_KEY]
            nxt = self.lookup(ref, current)
            if nxt is None:
                raise ValueError(f"{dotted} references unknown token '{ref}'")
            current = nxt
        if current is leaf:
            return leaf.value, None
        if current.layer != "primitive":
            raise ValueError(
                f"{'.'.join((leaf.layer, *leaf.path))} resolves to "
                f"{'.'.join((current.layer, *current.path))}, which is not a primitive token"
            )
        return current.value, ".".join((current.layer, *current.path))


def collect_token_issues(tokens: TokenSystem) -> list[str]:
    """
    Check a token system without raising.

    Returns:
        Human-readable issues: dangling or cyclic references, references
        from the primitive layer, literals in the semantic layer and
        flattened names that collide.
    """
    leaves = [
        _RawLeaf(layer, path, value)
        for layer, tree in tokens.layers()
        for path, value in iter_leaves(tree)
    ]
    resolver = _Resolver(leaves)
    issues: list[str] = []
    owners: dict[str, str] = {}

    for leaf in leaves:
        dotted = ".".join((leaf.layer, *leaf.path))
        name = "-".join(leaf.path)
        if name in owners:
            issues.append(f"token name '{name}' is produced by both {owners[name]} and {dotted}")
        else:
            owners[name] = dotted

        if not is_reference(leaf.value):
            if leaf.layer == "semantic":
                issues.append(
                    f"{dotted} is a literal value; semantic tokens must reference a primitive"
                )
            continue
        if leaf.layer == "primitive":
            issues.append(f"{dotted} is a reference; primitive tokens must be literal values")
            continue
        try:
            resolver.resolve(leaf)
        except ValueError as e:
            issues.append(str(e))

    return issues


class TokenSet:
    """
    Flattened, resolved view of a token system.

    Build with ``TokenSet.from_system``; the constructor does not validate.
    """

    def __init__(self, entries: list[TokenEntry]):
        self.entries = entries

    @classmethod
    def from_system(cls, tokens: TokenSystem) -> TokenSet:
        """
        Flatten and resolve every layer.

        Raises:
            SchemaValidationError: If any reference is dangling or cyclic,
                or two tokens flatten to the same name
        """
        issues = collect_token_issues(tokens)
        if issues:
            raise make_token_error(issues)

        leaves = [
            _RawLeaf(layer, path, value)
            for layer, tree in tokens.layers()
            for path, value in iter_leaves(tree)
        ]
        resolver = _Resolver(leaves)
        entries: list[TokenEntry] = []
        for leaf in leaves:
            resolved, target = resolver.resolve(leaf)
            ref = leaf.value[REF_KEY] if is_reference(leaf.value) else None
            entries.append(TokenEntry(leaf.layer, leaf.path, leaf.value, ref, resolved, target))

        logger.debug(f"Flattened {len(entries)} tokens")
        return cls(entries)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[TokenEntry]:
        return iter(self.entries)

    def layer(self, name: str) -> list[TokenEntry]:
        return [e for e in self.entries if e.layer == name]

    def get(self, name: str) -> TokenEntry | None:
        """Look up an entry by flattened name."""
        for entry in self.entries:
            if entry.name == name:
                return entry
        return None

    def resolved(self) -> dict[str, Any]:
        """Flattened name → literal value, in flattening order."""
        return {e.name: e.resolved for e in self.entries}

    def nested(self, layer: str | None = None) -> dict[str, Any]:
        """
        Rebuild a nested tree of resolved values.

        Args:
            layer: Restrict to one layer; otherwise layers become top-level keys
        """
        root: dict[str, Any] = {}
        for entry in self.entries:
            if layer is not None and entry.layer != layer:
                continue
            path = entry.path if layer is not None else (entry.layer, *entry.path)
            node = root
            for key in path[:-1]:
                node = node.setdefault(key, {})
            node[path[-1]] = entry.resolved
        return root

    def css_block(self, selector: str = ":root", prefix: str = "", use_var_refs: bool = True) -> str:
        """
        Render CSS custom properties.

        References render as ``var(--target)`` when ``use_var_refs`` is set,
        so overriding a primitive cascades to the tokens built on it.
        """
        target_names = {
            ".".join((e.layer, *e.path)): e.name for e in self.entries if e.layer == "primitive"
        }
        lines = [f"{selector} {{"]
        for entry in self.entries:
            if use_var_refs and entry.target and entry.target in target_names:
                value = f"var(--{prefix}{target_names[entry.target]})"
            else:
                value = format_css_value(entry.resolved)
            lines.append(f"  --{prefix}{entry.name}: {value};")
        lines.append("}")
        return "\n".join(lines)

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.nested(), indent=indent, ensure_ascii=False)


def format_css_value(value: Any) -> str:
    """Render a literal token value as CSS text."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ", ".join(format_css_value(v) for v in value)
    return str(value)
