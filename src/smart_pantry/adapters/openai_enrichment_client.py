"""OpenAI client for product enrichment and storage images."""

import json
from dataclasses import dataclass

from openai import AsyncOpenAI

from smart_pantry.services.enrichment import EnrichmentClient


@dataclass
class OpenAIEnrichmentClient(EnrichmentClient):
    """Enrichment client backed by the OpenAI Responses and Images APIs."""

    client: AsyncOpenAI

    @classmethod
    def create(cls, api_key: str) -> "OpenAIEnrichmentClient":
        """Create an OpenAI enrichment client."""
        return cls(client=AsyncOpenAI(api_key=api_key))

    async def generate_enrichment(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        schema_name: str,
        schema: dict[str, object],
        prompt: str,
    ) -> dict[str, object]:
        """Ask for a JSON object matching ``schema`` and return it decoded."""
        options: dict[str, object] = {}
        if reasoning_effort:
            options["reasoning"] = {"effort": reasoning_effort}
        response = await self.client.responses.create(
            model=model,
            input=prompt,
            text={"format": _json_schema_format(schema_name, schema)},
            store=store,
            **options,
        )
        if not response.output_text:
            raise RuntimeError(f"OpenAI returned no {schema_name} output")
        return json.loads(response.output_text)

    async def generate_image(self, *, model: str, prompt: str) -> str | None:
        """Generate an image and return it as a PNG data URL."""
        response = await self.client.images.generate(model=model, prompt=prompt)
        for image in response.data or []:
            if image.b64_json:
                return f"data:image/png;base64,{image.b64_json}"
        return None

    async def close(self) -> None:
        """Close the underlying OpenAI client."""
        await self.client.close()


def _json_schema_format(name: str, schema: dict[str, object]) -> dict[str, object]:
    return {"type": "json_schema", "name": name, "strict": True, "schema": schema}
