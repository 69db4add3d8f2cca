"""OpenAI Responses API client for tool-assisted recipe generation."""

import json
import logging
from collections.abc import Sequence
from dataclasses import dataclass

from openai import AsyncOpenAI

from recipe_suggestions.services.recipes import RecipeModelClient
from recipe_suggestions.services.tools import ToolDefinition

_logger = logging.getLogger(__name__)


class ToolLoopLimitError(RuntimeError):
    """Raised when the model keeps calling tools past the turn limit."""


class UnknownToolError(RuntimeError):
    """Raised when the model calls a tool that was not declared."""


@dataclass
class OpenAIRecipeClient(RecipeModelClient):
    """Recipe client backed by OpenAI Responses API with function tools."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIRecipeClient":
        """Create an OpenAI recipe client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        temperature: float | None,
        prompt: str,
        schema: dict[str, object],
        tools: Sequence[ToolDefinition],
        max_turns: int,
    ) -> dict[str, object]:
        """Run the model, serving its tool calls, until it returns JSON output."""
        handlers = {tool.name: tool.handler for tool in tools}
        conversation: list[object] = [{"role": "user", "content": prompt}]
        request_payload: dict[str, object] = {
            "model": model,
            "tools": [tool.declaration() for tool in tools],
            "text": {
                "format": {
                    "type": "json_schema",
                    "name": "recipes_suggestion",
                    "strict": True,
                    "schema": schema,
                }
            },
        }
        if temperature is not None:
            request_payload["temperature"] = temperature

        for turn in range(1, max_turns + 1):
            response = await self.client.responses.create(
                input=conversation, **request_payload
            )
            calls = [item for item in response.output if item.type == "function_call"]
            if not calls:
                output_text = response.output_text
                if not output_text:
                    raise RuntimeError("OpenAI returned an empty response")
                return json.loads(output_text)

            conversation.extend(response.output)
            for call in calls:
                handler = handlers.get(call.name)
                if handler is None:
                    raise UnknownToolError(f"Model called undeclared tool {call.name!r}")
                _logger.info("Tool call (turn %s): %s %s", turn, call.name, call.arguments)
                output = await handler(json.loads(call.arguments))
                conversation.append(
                    {
                        "type": "function_call_output",
                        "call_id": call.call_id,
                        "output": output,
                    }
                )

        raise ToolLoopLimitError(f"Model did not finish within {max_turns} turns")

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()
