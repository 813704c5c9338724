"""Routing of free-text user queries.

A query is matched against an ordered list of keyword rules (case-insensitive
substring match, first rule wins). When nothing matches, the query goes to the
external generator if one is configured, and otherwise gets the default reply.
The router always produces a reply; the only non-success outcome is a
malformed expression in the calculation rule.
"""

import logging
import random
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, Sequence

from models import MessageRole, QueryData, QueryResponse

from .errors import ExpressionError
from .expression import evaluate, format_number
from .providers import ChatMessage, GeneratorProvider, ToolDefinition
from .registry import Registry

logger = logging.getLogger(__name__)

GREETING_REPLY = "👋 Hello! I'm your MCP assistant. How can I help you?"
FALLBACK_REPLY = "I don't understand that command. Type 'help' to see the available options."
CALCULATION_ERROR = "I couldn't process that math expression"

EXAMPLE_COMMANDS = (
    '"hello" - Greeting',
    '"time" - Show the current time',
    '"weather" - Simulated weather',
    '"calculate X + Y" - Simple calculator',
)

WEATHER_CONDITIONS = (
    "☀️ Sunny",
    "🌤️ Partly cloudy",
    "☁️ Cloudy",
    "🌧️ Rainy",
    "⛈️ Stormy",
)
SIMULATED_TEMPERATURE = "22°C"

SYSTEM_PROMPT = """You are an MCP (Model Context Protocol) assistant that can access resources and tools.

Available resources: {resources}
Available tools: {tools}

Answer in a helpful and friendly way. If the user asks to use a specific tool, tell them how to do it.
If you don't understand something, ask for clarification."""


@dataclass(frozen=True)
class QueryRule:
    """A keyword rule of the routing cascade.

    Attributes:
        name: Rule identifier (e.g. "greeting")
        keywords: Lower-case substrings that trigger the rule
        respond: Callable building the reply from the original query text
    """

    name: str
    keywords: Sequence[str]
    respond: Callable[[str], QueryResponse]

    def matches(self, lowered_query: str) -> bool:
        return any(keyword in lowered_query for keyword in self.keywords)


def text_reply(text: str) -> QueryResponse:
    """Build a success envelope carrying a single text item."""
    return QueryResponse.ok(QueryData.from_text(text))


class QueryRouter:
    """Maps free-text input to a reply.

    Args:
        registry: Registry consulted live for the help reply and the
            generator prompt
        provider: Optional external generator used when no rule matches
        rng: Random source for the simulated weather
        clock: Callable returning the current local time
    """

    def __init__(
        self,
        registry: Registry,
        provider: Optional[GeneratorProvider] = None,
        rng: Optional[random.Random] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.registry = registry
        self.provider = provider
        self._rng = rng or random.Random()
        self._clock = clock

        self.rules: List[QueryRule] = [
            QueryRule("greeting", ("hola", "hello"), self._greeting),
            QueryRule("help", ("ayuda", "help"), self._help),
            QueryRule("time", ("hora", "time"), self._time),
            QueryRule("weather", ("clima", "weather"), self._weather),
            QueryRule("calculation", ("calculate", "calcula"), self._calculate),
        ]
        calc_keywords = sorted(self.rules[-1].keywords, key=len, reverse=True)
        self._calc_trigger = re.compile(
            "|".join(re.escape(k) for k in calc_keywords), re.IGNORECASE
        )

    def match_rule(self, query: str) -> Optional[QueryRule]:
        """Return the first rule matching ``query``, or None."""
        lowered = query.lower()
        for rule in self.rules:
            if rule.matches(lowered):
                return rule
        return None

    async def process_user_query(
        self, query: str, context: Optional[Dict[str, Any]] = None
    ) -> QueryResponse:
        """Produce a reply for a free-text query.

        Args:
            query: User input; may be empty
            context: Optional caller context (currently unused)

        Returns:
            A success envelope, or a failure envelope for malformed
            calculations
        """
        query = query or ""
        rule = self.match_rule(query)
        if rule is not None:
            logger.debug(f"Query matched rule '{rule.name}'")
            return rule.respond(query)

        if self.provider is None:
            return text_reply(FALLBACK_REPLY)
        return await self._generate(query)

    # --- keyword rules -----------------------------------------------------

    def _greeting(self, query: str) -> QueryResponse:
        return text_reply(GREETING_REPLY)

    def _help(self, query: str) -> QueryResponse:
        tools = ", ".join(self.registry.list_tool_names())
        resources = ", ".join(self.registry.list_resource_names())
        lines = [
            "Available commands:",
            f"• Tools: {tools}",
            f"• Resources: {resources}",
        ]
        lines.extend(f"• {example}" for example in EXAMPLE_COMMANDS)
        return text_reply("\n".join(lines))

    def _time(self, query: str) -> QueryResponse:
        return text_reply(f"🕐 The current time is: {self._clock().strftime('%c')}")

    def _weather(self, query: str) -> QueryResponse:
        condition = self._rng.choice(WEATHER_CONDITIONS)
        return text_reply(f"🌤️ Simulated weather: {condition} - {SIMULATED_TEMPERATURE}")

    def _calculate(self, query: str) -> QueryResponse:
        expression = self._calc_trigger.sub("", query).strip()
        try:
            result = evaluate(expression)
        except ExpressionError as e:
            logger.info(f"Rejected expression {expression!r}: {e}")
            return QueryResponse.fail(f"{CALCULATION_ERROR}: {e}")
        return text_reply(f"🧮 Result: {expression} = {format_number(result)}")

    # --- external generator --------------------------------------------------

    def build_system_prompt(self) -> str:
        return SYSTEM_PROMPT.format(
            resources=", ".join(self.registry.list_resource_names()),
            tools=", ".join(self.registry.list_tool_names()),
        )

    def build_tool_definitions(self) -> List[ToolDefinition]:
        """Describe the registered tools for the generator."""
        definitions = []
        for tool in self.registry.iter_tools():
            parameters = tool.metadata.get("parameters")
            if not isinstance(parameters, dict):
                parameters = {"type": "object", "properties": {}, "required": []}
            definitions.append(
                ToolDefinition(
                    name=tool.name,
                    description=tool.description or f"Runs the {tool.name} tool",
                    parameters=parameters,
                )
            )
        return definitions

    async def _generate(self, query: str) -> QueryResponse:
        """Ask the generator for a reply, falling back on any failure."""
        try:
            if not await self.provider.is_available():
                logger.warning("LLM not available, using the default reply")
                return text_reply(FALLBACK_REPLY)

            reply = await self.provider.chat(
                [
                    ChatMessage(MessageRole.SYSTEM, self.build_system_prompt()),
                    ChatMessage(MessageRole.USER, query),
                ],
                self.build_tool_definitions(),
            )
        except Exception as e:
            logger.warning(f"Error processing query with LLM: {e}")
            return text_reply(FALLBACK_REPLY)

        if reply.tool_calls:
            logger.debug(
                f"LLM requested tools {[call.name for call in reply.tool_calls]}; "
                "not executing them"
            )
        return text_reply(reply.content)
