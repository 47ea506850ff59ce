"""Go source parsing for struct extraction.

Recovers the struct name and exported fields from generated (or hand
written) Go source so the next stage can build on them. Parsing is done
with tree-sitter and the Go grammar; only the package clause, imports and
type declarations are turned into nodes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from .descriptors import FieldDescriptor, SourceStructure
from .errors import NoFieldsError, NoStructureError, PreconditionError, SourceParseError
from .naming import is_exported, strip_dto_marker

GO_LANGUAGE: Final[Language] = Language(tree_sitter_go.language())

_DECLARATIONS: Final[frozenset[str]] = frozenset({
    "const_declaration",
    "function_declaration",
    "import_declaration",
    "method_declaration",
    "type_declaration",
    "var_declaration",
})


@dataclass(frozen=True, slots=True)
class StructField:
    """One field declaration; ``names`` is empty for an embedded field."""

    names: tuple[str, ...]
    type_text: str
    tag: str | None = None

    @property
    def embedded(self) -> bool:
        return not self.names


@dataclass(frozen=True, slots=True)
class TypeSpec:
    """A top-level type declaration; ``fields`` is None unless it is a struct."""

    name: str
    type_text: str
    fields: tuple[StructField, ...] | None = None
    is_alias: bool = False


@dataclass(frozen=True, slots=True)
class GoFile:
    package_name: str
    imports: tuple[str, ...]
    type_specs: tuple[TypeSpec, ...]


def _error_at(node: Node, message: str) -> SourceParseError:
    row, column = node.start_point
    return SourceParseError(message, row + 1, column + 1)


def _first_error(node: Node) -> Node | None:
    if node.is_error or node.is_missing:
        return node
    for child in node.children:
        if child.has_error or child.is_missing:
            found = _first_error(child)
            if found is not None:
                return found
    return None


class GoSourceReader:
    """Turns a tree-sitter syntax tree into GoFile nodes."""

    def __init__(self, source: str) -> None:
        self._source = source.encode("utf-8")

    def _text(self, node: Node) -> str:
        return self._source[node.start_byte:node.end_byte].decode("utf-8")

    def _describe(self, node: Node) -> str:
        text = self._text(node).strip().splitlines()
        return f"'{text[0][:20]}'" if text else "EOF"

    def read(self) -> GoFile:
        tree = Parser(GO_LANGUAGE).parse(self._source)
        root = tree.root_node
        if root.has_error:
            raise self._syntax_error(root)

        top_level = [child for child in root.named_children if child.type != "comment"]
        if not top_level or top_level[0].type != "package_clause":
            found = self._describe(top_level[0]) if top_level else "EOF"
            raise SourceParseError(f"expected 'package', found {found}", 1, 1)

        package_name = self._package_name(top_level[0])
        imports: list[str] = []
        type_specs: list[TypeSpec] = []
        seen_declaration = False

        for node in top_level[1:]:
            if node.type not in _DECLARATIONS:
                raise _error_at(
                    node,
                    "non-declaration statement outside function body, "
                    f"found {self._describe(node)}",
                )
            if node.type == "import_declaration":
                if seen_declaration:
                    raise _error_at(node, "imports must appear before other declarations")
                imports.extend(self._import_paths(node))
                continue

            seen_declaration = True
            if node.type == "type_declaration":
                type_specs.extend(self._type_specs(node))

        return GoFile(
            package_name=package_name,
            imports=tuple(imports),
            type_specs=tuple(type_specs),
        )

    def _syntax_error(self, root: Node) -> SourceParseError:
        node = _first_error(root) or root
        if node.is_missing:
            return _error_at(node, f"expected '{node.type}'")
        return _error_at(node, f"syntax error: unexpected {self._describe(node)}")

    def _package_name(self, clause: Node) -> str:
        for child in clause.named_children:
            if child.type == "package_identifier":
                name = self._text(child)
                if name == "_":
                    raise _error_at(child, "invalid package name _")
                return name
        raise _error_at(clause, "expected package name")

    def _import_paths(self, declaration: Node) -> list[str]:
        specs: list[Node] = []
        for child in declaration.named_children:
            if child.type == "import_spec":
                specs.append(child)
            elif child.type == "import_spec_list":
                specs.extend(c for c in child.named_children if c.type == "import_spec")
        return [self._text(spec.child_by_field_name("path"))[1:-1] for spec in specs]

    def _type_specs(self, declaration: Node) -> list[TypeSpec]:
        return [
            self._type_spec(child)
            for child in declaration.named_children
            if child.type in ("type_spec", "type_alias")
        ]

    def _type_spec(self, node: Node) -> TypeSpec:
        type_node = node.child_by_field_name("type")
        fields = None
        if type_node.type == "struct_type":
            fields = self._struct_fields(type_node)
        return TypeSpec(
            name=self._text(node.child_by_field_name("name")),
            type_text=self._text(type_node),
            fields=fields,
            is_alias=node.type == "type_alias",
        )

    def _struct_fields(self, struct_node: Node) -> tuple[StructField, ...]:
        fields: list[StructField] = []
        for body in struct_node.named_children:
            if body.type != "field_declaration_list":
                continue
            for declaration in body.named_children:
                if declaration.type == "field_declaration":
                    fields.append(self._struct_field(declaration))
        return tuple(fields)

    def _struct_field(self, node: Node) -> StructField:
        names = tuple(self._text(name) for name in node.children_by_field_name("name"))
        type_node = node.child_by_field_name("type")
        tag_node = node.child_by_field_name("tag")

        if names:
            type_text = self._text(type_node)
        else:
            # keep the '*' of an embedded pointer
            type_text = self._source[node.start_byte:type_node.end_byte].decode("utf-8")

        return StructField(
            names=names,
            type_text=type_text,
            tag=self._text(tag_node) if tag_node is not None else None,
        )


def parse_go_source(source: str) -> GoFile:
    """Parse Go source into a GoFile.

    Raises:
        SourceParseError: If the text is not valid Go.
    """
    return GoSourceReader(source).read()


def extract_structure(source: str) -> SourceStructure:
    """Return the first declared type's name and its exported fields.

    Fields keep declaration order. Each name of a multi-name declaration
    becomes its own field; embedded fields are skipped.

    Raises:
        PreconditionError: If the source is empty.
        SourceParseError: If the source is not valid Go.
        NoStructureError: If no type is declared.
        NoFieldsError: If the type has no exported fields.
    """
    if not source:
        raise PreconditionError("source contents")

    go_file = parse_go_source(source)
    if not go_file.type_specs:
        raise NoStructureError()

    spec = go_file.type_specs[0]
    entity_name = strip_dto_marker(spec.name)
    fields = tuple(
        FieldDescriptor(name=name, resolved_type=item.type_text, owning_entity_name=entity_name)
        for item in spec.fields or ()
        for name in item.names
        if is_exported(name)
    )
    if not fields:
        raise NoFieldsError(spec.name)

    return SourceStructure(struct_name=spec.name, entity_name=entity_name, fields=fields)
