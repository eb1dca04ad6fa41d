# Prompt fragments for the recommendation system message.
# The generator fills {context} with the rendered profile blocks.

BASE_GUARDRAILS = """\
Only recommend influencers that appear in the profile data above.
Never mention influencers that are not listed.
Match recommendations to the student's level and goals.
"""


def build_system_prompt(intro: str, context: str, criteria: str, style: str, language: str) -> str:
    return f"""{intro}

Influencers currently registered:
{context}

Recommendation criteria:
{criteria}

Response style:
{style}
- Respond in {language}.

{BASE_GUARDRAILS}"""
