"""
Study material generation prompts.
"""

STUDY_MATERIALS_SYSTEM_PROMPT = """You are an expert tutor who writes concise, accurate study material for students.
You always answer with a single JSON object and nothing else: no markdown fences, no commentary."""


def get_study_materials_prompt(subject: str, topic: str) -> str:
    """
    Get prompt for generating the complete study document.

    Args:
        subject: Broad subject area (e.g. "Biology")
        topic: Specific topic within the subject (e.g. "Mitosis")

    Returns:
        Formatted prompt string
    """
    return f"""Create study material for a student learning "{topic}" in the subject "{subject}".

    Respond with a JSON object using exactly these keys:
    {{
      "detailedSummary": "A thorough multi-paragraph explanation of the topic.",
      "textualMindMap": "A tree of the key concepts using ├─, └─ and │ characters, one node per line, with the topic as the root.",
      "diagramSuggestions": [
        {{"name": "Diagram name", "description": "What the diagram shows", "steps": ["Step 1 to draw it", "Step 2"]}}
      ],
      "mnemonics": ["A memory shortcut and what it stands for"],
      "multipleChoiceQuestions": [
        {{
          "question": "Question text",
          "options": {{"A": "Option A", "B": "Option B", "C": "Option C", "D": "Option D"}},
          "correctAnswerKey": "A",
          "explanation": "Why the answer is correct"
        }}
      ],
      "visualResources": [
        {{"title": "Resource title", "url": "https://...", "type": "video"}}
      ],
      "extraTips": ["Common mistakes to avoid and study strategies"]
    }}

    Requirements:
    - 2-4 diagram suggestions, 3-5 mnemonics, 5 multiple choice questions and 3-5 extra tips
    - correctAnswerKey must be one of the keys in options
    - visualResources is optional; "type" is either "video" or "image". Only include well-known, stable URLs
      (e.g. YouTube search results or Wikimedia pages); omit the key if unsure
    - Keep the language suitable for a high-school or early university student"""
