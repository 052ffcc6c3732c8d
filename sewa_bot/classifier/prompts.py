CLASSIFY_PROMPT = """
You are an AI assistant for SEWA Smart Village website (Didwana, Rajasthan, India).
Analyze the following content and respond in JSON format:

Content: "{text}"
Has Image: {has_image}

Respond with this exact JSON structure:
{{
  "category": "news|event|gallery|document|heritage|emergency|contact|announcement",
  "title_hindi": "शीर्षक हिंदी में",
  "title_english": "Title in English",
  "description_hindi": "विवरण हिंदी में",
  "description_english": "Description in English",
  "suggested_section": "which section of website this belongs to",
  "priority": "high|medium|low",
  "tags": ["tag1", "tag2"]
}}

Guidelines:
- If about temple/mandir/heritage → category: heritage
- If about emergency/ambulance/police → category: emergency
- If general photo → category: gallery
- If announcement/notice → category: announcement
- If event/mela/function → category: event
- If news/update → category: news

You MUST respond with pure JSON only. No markdown, no prose.
"""


def build_prompt(text: str, has_image: bool) -> str:
    return CLASSIFY_PROMPT.format(
        text=text,
        has_image="true" if has_image else "false",
    )
