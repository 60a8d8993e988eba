"""Prompt assembly + Claude content generation."""

from .config import CLAUDE_MODEL, call_claude_cli, get_anthropic_client, get_claude_backend
from .log import log
from .retry import with_retry
from .style import get_archetype, load_style_corpus

OUTPUT_TYPES = {
    "post": "single social media post",
    "thread": "thread of short social media posts",
    "long_form": "long-form essay",
}

TRENDING_CONTEXT_ITEMS = 5

POST_MAX_CHARS = 280
THREAD_MAX_PARTS = 8


@with_retry(max_retries=2, base_delay=3.0)
def _call_claude(prompt: str) -> str:
    """Call Claude via API key or the `claude` CLI."""
    backend = get_claude_backend()

    if backend == "api":
        client = get_anthropic_client()
        msg = client.messages.create(
            model=CLAUDE_MODEL,
            max_tokens=2000,
            messages=[{"role": "user", "content": prompt}],
        )
        return msg.content[0].text.strip()

    log("Using claude CLI for generation...")
    return call_claude_cli(prompt)


def shape_output(content: str, output_type: str) -> str:
    """Fit generated text to its output shape.

    Posts are capped at 280 characters. Threads keep at most 8 blank-line
    separated parts, each prefixed "i/N". Long form is returned as-is.
    """
    content = content.strip()
    if output_type == "post":
        return content[:POST_MAX_CHARS].rstrip()
    if output_type == "thread":
        parts = [p.strip() for p in content.split("\n\n") if p.strip()][:THREAD_MAX_PARTS]
        return "\n\n".join(f"{i}/{len(parts)}\n{part}" for i, part in enumerate(parts, 1))
    return content


def build_prompt(topic: str, style: str, output_type: str, archetype: dict, trending=None) -> str:
    """Assemble the generation prompt, optionally enriched with a TrendingSnapshot."""
    if output_type not in OUTPUT_TYPES:
        raise ValueError(f"Unknown output type {output_type!r}; expected one of {sorted(OUTPUT_TYPES)}")

    prompt = f"""Generate a {OUTPUT_TYPES[output_type]} about "{topic}".
The style should be "{style}".
Use one of these hooks: {", ".join(archetype["hooks"])}
Follow this structure: {", ".join(archetype["structures"])}
Include a call to action like one of these: {", ".join(archetype["ctas"])}
Ensure the output is natural and avoids AI-like grammar and phrasing."""

    if trending is not None and (trending.topics or trending.hashtags):
        topics = "; ".join(trending.topics[:TRENDING_CONTEXT_ITEMS])
        hashtags = " ".join(trending.hashtags[:TRENDING_CONTEXT_ITEMS])
        prompt += f"""

Optional context, use only where it fits the topic naturally:
Currently trending topics: {topics}
Currently trending hashtags: {hashtags}"""

    return prompt


def generate_content(topic: str, style: str, output_type: str = "post", use_trending: bool = True,
                     aggregator=None, corpus: dict | None = None) -> dict:
    """Look up the style, optionally pull trending context, and generate text."""
    corpus = corpus if corpus is not None else load_style_corpus()
    archetype = get_archetype(corpus, style)

    trending = None
    if use_trending and aggregator is not None:
        trending = aggregator.get_trending()
        log(f"Trending context: {trending.source} ({len(trending.topics)} topics)")

    prompt = build_prompt(topic, style, output_type, archetype, trending)
    content = _call_claude(prompt)

    return {
        "content": shape_output(content, output_type),
        "topic": topic,
        "style": style,
        "output_type": output_type,
        "trending_source": trending.source if trending is not None else None,
    }
