"""
Component expansion engine.

The engine walks the token stream of a markup string and replaces every
component tag with the rendered template of its component. Rendering a
component template re-enters the same pipeline, so components nest to any
depth, bounded by the ``max_depth`` setting.

Expansion of one tag:
  1. Look up the component definition.
  2. Parse attributes and evaluate dynamic ones in the enclosing context.
  3. Capture the unexpanded body up to the matching closing tag.
  4. Resolve the component's constructor dependencies.
  5. Build a fresh child context (inputs, dependencies, ``this``,
     ``attributes``, ``slot``); nothing else crosses the boundary.
  6. Render the component's Jinja2 template and expand its output.
  7. Splice the body, expanded once in the enclosing context, wherever the
     template referenced the slot.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from functools import lru_cache
from typing import Any

import inflection
from jinja2 import Environment, StrictUndefined, Template, TemplateError
from markupsafe import Markup

from xview.components.definition import ComponentDefinition
from xview.components.registry import ComponentRegistry
from xview.container import DependencyResolver
from xview.core.settings import ViewSettings
from xview.core.types import RenderContext
from xview.exceptions import (
    CyclicExpansionError,
    DependencyResolutionError,
    MalformedMarkupError,
    TemplateRenderError,
)
from xview.markup import (
    AttributeValue,
    LiteralValue,
    TagCloseToken,
    TagOpenToken,
    Token,
    parse_attributes,
    scan,
)
from xview.rendering.attribute_bag import ComponentAttributes, RenderedAttribute
from xview.rendering.evaluator import ExpressionEvaluator, JinjaExpressionEvaluator
from xview.rendering.slots import Slot

logger = logging.getLogger(__name__)


@lru_cache(maxsize=4)
def _template_environment(autoescape: bool) -> Environment:
    return Environment(
        autoescape=autoescape,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=StrictUndefined,
    )


@lru_cache(maxsize=256)
def _compile_template(autoescape: bool, source: str) -> Template:
    return _template_environment(autoescape).from_string(source)


class ExpansionEngine:
    """Expands component tags in markup.

    One engine may serve many renders; every render call owns its contexts,
    token streams and slots.

    Params:
        registry: Component definitions by tag name
        resolver: Collaborator supplying injected dependencies
        evaluator: Evaluator for dynamic attribute expressions
        settings: Markup syntax and recursion limits
    """

    def __init__(
        self,
        registry: ComponentRegistry,
        resolver: DependencyResolver,
        evaluator: ExpressionEvaluator | None = None,
        settings: ViewSettings | None = None,
    ):
        self.registry = registry
        self.resolver = resolver
        self.evaluator = evaluator or JinjaExpressionEvaluator()
        self.settings = settings or ViewSettings()

    def render(self, markup: str, context: RenderContext) -> str:
        """
        Expand every component tag in the markup.

        Params:
            markup: Markup possibly containing component tags
            context: Variables visible to dynamic attributes written in the markup

        Returns:
            Fully expanded markup; text outside component tags is unchanged

        Raises:
            MalformedMarkupError: If component tags are unbalanced or unparsable
            UnknownComponentError: If a tag has no registered component
            DependencyResolutionError: If an injected dependency cannot be resolved
            CyclicExpansionError: If nesting exceeds the configured maximum depth
            ExpressionEvaluationError: If a dynamic attribute fails to evaluate
            TemplateRenderError: If a component template fails to render
        """
        return self._expand(markup, context, ())

    def _expand(self, markup: str, context: RenderContext, chain: tuple[str, ...]) -> str:
        tokens = scan(markup, prefix=self.settings.tag_prefix)
        output: list[str] = []

        for token in tokens:
            if isinstance(token, TagOpenToken):
                body = "" if token.self_closing else self._capture_body(token, tokens)
                output.append(self._expand_component(token, body, context, chain))
            else:
                output.append(token.source)

        return "".join(output)

    def _capture_body(self, opening: TagOpenToken, tokens: Iterator[Token]) -> str:
        """Consume tokens up to the closing tag matching ``opening`` and return their source."""
        depth = 1
        parts: list[str] = []

        for token in tokens:
            if isinstance(token, TagOpenToken) and token.name == opening.name and not token.self_closing:
                depth += 1
            elif isinstance(token, TagCloseToken) and token.name == opening.name:
                depth -= 1
                if depth == 0:
                    return "".join(parts)
            parts.append(token.source)

        raise MalformedMarkupError(
            f"Component tag <{opening.name}> is never closed",
            tag_name=opening.name,
            location=opening.location,
        )

    def _expand_component(
        self,
        token: TagOpenToken,
        body: str,
        context: RenderContext,
        chain: tuple[str, ...],
    ) -> str:
        tag_chain = (*chain, token.name)
        if len(tag_chain) > self.settings.max_depth:
            raise CyclicExpansionError(tag_chain, self.settings.max_depth)

        definition = self.registry.lookup(token.name)
        logger.debug(f"Expanding <{token.name}> at depth {len(tag_chain)}")

        try:
            attributes = parse_attributes(token.raw_attributes, sigil=self.settings.binding_sigil)
        except MalformedMarkupError as e:
            raise MalformedMarkupError(str(e), tag_name=token.name, location=token.location) from e

        # Dynamic attributes are written in the enclosing markup, so they see its variables.
        values = {name: self._attribute_value(value, context) for name, value in attributes.items()}

        slot = Slot(body, lambda markup: self._expand(markup, context, chain))
        child_context = self._child_context(definition, attributes, values, slot)

        rendered = self._render_template(definition, child_context)
        expanded = self._expand(rendered, child_context, tag_chain)
        return slot.splice(expanded)

    def _attribute_value(self, value: AttributeValue, context: RenderContext) -> Any:
        if isinstance(value, LiteralValue):
            return value.text
        return self.evaluator.evaluate(value.source, context)

    def _child_context(
        self,
        definition: ComponentDefinition,
        attributes: dict[str, AttributeValue],
        values: dict[str, Any],
        slot: Slot,
    ) -> RenderContext:
        dependencies = self._resolve_dependencies(definition)
        declared = set(definition.input_names)

        child_context: RenderContext = dict(dependencies)
        child_context.update({spec.name: spec.default for spec in definition.inputs})

        extra: list[RenderedAttribute] = []
        for name, value in values.items():
            literal = isinstance(attributes[name], LiteralValue)
            input_name = name if name in declared else inflection.underscore(name)
            if input_name in declared:
                child_context[input_name] = _input_value(value, literal)
            else:
                extra.append(RenderedAttribute(name, value, literal=literal))

        if definition.factory is not None:
            child_context["this"] = definition.factory(**dependencies)
        child_context[self.settings.attributes_variable] = ComponentAttributes(extra)
        child_context[self.settings.slot_variable] = slot
        return child_context

    def _resolve_dependencies(self, definition: ComponentDefinition) -> dict[str, Any]:
        resolved = {}
        for dependency in definition.dependencies:
            try:
                resolved[dependency.parameter_name] = self.resolver.resolve(dependency.required_type)
            except Exception as e:
                raise DependencyResolutionError(
                    definition.tag_name, dependency.parameter_name, dependency.required_type
                ) from e
        return resolved

    def _render_template(self, definition: ComponentDefinition, child_context: RenderContext) -> str:
        try:
            template = _compile_template(self.settings.autoescape, definition.template_source)
            return template.render(child_context)
        except TemplateError as e:
            raise TemplateRenderError(definition.tag_name, str(e)) from e


def _input_value(value: Any, literal: bool) -> Any:
    """Value bound to a declared input for one attribute.

    A bare attribute such as ``disabled`` switches the input on. Quoted
    literals are already markup, so the template must not escape them again.
    """
    if not literal:
        return value
    if value is None:
        return True
    return Markup(value)
