"""Prompt templates for each content-generation scenario.

Each prompt asks the backend for a single JSON document with a fixed set of
fields; the synthesizer defaults any field that comes back missing.
"""

from __future__ import annotations

from infinity_market.models.world import WorldDefinition

SITE_PROMPT = """\
You are creating a comprehensive, educational website homepage based on this user query: {query}

Generate a complete website with:
1. A clear, engaging title (5-10 words)
2. A concise description/tagline (15-25 words)
3. Rich, informative content organized into sections with headings

The content should be:
- Educational and research-backed
- Well-structured with clear sections
- Human-readable and engaging
- Practical and actionable
- NOT just a description, but actual valuable information

Return ONLY valid JSON in this exact format:
{{
  "title": "Website Title Here",
  "description": "Brief compelling description here",
  "content": "## Section 1\\n\\nParagraph content...\\n\\n## Section 2\\n\\nMore content..."
}}"""

WORLD_PROMPT = """\
You are creating an educational game-world website based on the "{name}" archetype.

World Details:
- Name: {name}
- Emoji: {emoji}
- Description: {description}
- Educational Goal: {educational_goal}
{slot_info}
Generate engaging content that:
1. Explains what this world teaches through play
2. Describes the game mechanics and interactions
3. Highlights how learning happens through discovery
4. Provides clear next steps for the user

Return ONLY valid JSON in this exact format:
{{
  "title": "Engaging World Title (5-8 words)",
  "description": "Compelling tagline about learning through play (15-25 words)",
  "content": "## Welcome to [World]\\n\\nIntroduction...\\n\\n## How It Works\\n\\nMechanics...\\n\\n## What You'll Learn\\n\\nEducational outcomes...\\n\\n## Get Started\\n\\nNext steps..."
}}"""

PAGE_PROMPT = """\
You are adding a new page to a website about {website_context}.

The user wants to add a page about: {page_query}

Generate a new page with:
1. A clear page title (3-8 words)
2. Rich, informative content organized with markdown headings and paragraphs

Return ONLY valid JSON in this exact format:
{{
  "title": "Page Title Here",
  "content": "## Section\\n\\nContent here..."
}}"""


def site_prompt(query: str) -> str:
    return SITE_PROMPT.format(query=query)


def world_prompt(world: WorldDefinition, slot_combination: str | None = None) -> str:
    slot_info = f"- Slot Combination: {slot_combination}\n" if slot_combination else ""
    return WORLD_PROMPT.format(
        name=world.name,
        emoji=world.emoji,
        description=world.description,
        educational_goal=world.educational_goal,
        slot_info=slot_info,
    )


def page_prompt(website_context: str, page_query: str) -> str:
    return PAGE_PROMPT.format(website_context=website_context, page_query=page_query)
