"""
Utility functions for rendering study materials as Markdown for the Gradio UI.

Rendering is pure: nothing here fetches or mutates state.
"""
from typing import List, Optional

from study_assistant.core.schemas import StudyMaterials, StudyTool

TOOL_ICONS = {
    StudyTool.DETAILED_SUMMARY: "📖",
    StudyTool.TEXTUAL_MIND_MAP: "🧠",
    StudyTool.DIAGRAM_SUGGESTIONS: "📊",
    StudyTool.MNEMONICS: "💡",
    StudyTool.QUIZ: "❓",
    StudyTool.VISUAL_RESOURCES: "🎬",
    StudyTool.EXTRA_TIPS: "✨",
}

NO_TOOL_PLACEHOLDER = "*Select a study tool above to view its content.*"


def format_materials_heading(subject: Optional[str], topic: Optional[str]) -> str:
    """Heading shown above the tool selector."""
    if subject and topic:
        return f"## {topic}\n*{subject}*"
    return "## Study Materials"


def _bullets(items: List[str], empty: str) -> str:
    items = [item.strip() for item in items if item and item.strip()]
    if not items:
        return empty
    return "\n".join(f"- {item}" for item in items)


def format_summary(materials: StudyMaterials) -> str:
    return materials.detailed_summary.strip() or "*No summary was generated.*"


def format_mind_map(materials: StudyMaterials) -> str:
    mind_map = materials.textual_mind_map.strip("\n")
    if not mind_map.strip():
        return "*No mind map was generated.*"
    # Code block keeps the tree glyphs aligned
    return f"```text\n{mind_map}\n```"


def format_diagram_suggestions(materials: StudyMaterials) -> str:
    if not materials.diagram_suggestions:
        return "*No diagram suggestions were generated.*"

    sections = []
    for diagram in materials.diagram_suggestions:
        lines = [f"### {diagram.name}", "", diagram.description]
        if diagram.steps:
            lines.append("")
            lines.extend(f"{i}. {step}" for i, step in enumerate(diagram.steps, 1))
        sections.append("\n".join(lines))
    return "\n\n".join(sections)


def format_mnemonics(materials: StudyMaterials) -> str:
    return _bullets(materials.mnemonics, "*No memory shortcuts were generated.*")


def format_quiz(materials: StudyMaterials) -> str:
    """
    Format multiple choice questions.

    Answers are hidden in a collapsible block under each question so the
    student can attempt the question first.
    """
    questions = materials.multiple_choice_questions
    if not questions:
        return "*No quiz questions were generated.*"

    sections = []
    for i, mcq in enumerate(questions, 1):
        lines = [f"**{i}. {mcq.question}**", ""]
        lines.extend(f"- **{key}.** {text}" for key, text in mcq.options.items())

        answer = f"**{mcq.correct_answer_key}.** {mcq.options[mcq.correct_answer_key]}"
        lines.append("")
        lines.append("<details><summary>Show answer</summary>")
        lines.append("")
        lines.append(f"✅ {answer}")
        if mcq.explanation:
            lines.append("")
            lines.append(mcq.explanation)
        lines.append("")
        lines.append("</details>")
        sections.append("\n".join(lines))
    return "\n\n---\n\n".join(sections)


def format_visual_resources(materials: StudyMaterials) -> str:
    resources = materials.visual_resources
    if not resources:
        return "*No visual resources were suggested for this topic.*"

    lines = []
    for resource in resources:
        icon = "📺" if resource.kind == "video" else "🖼️"
        lines.append(f"- {icon} [{resource.title}]({resource.url}) ({resource.kind})")
    return "\n".join(lines)


def format_extra_tips(materials: StudyMaterials) -> str:
    return _bullets(materials.extra_tips, "*No extra tips were generated.*")


_RENDERERS = {
    StudyTool.DETAILED_SUMMARY: format_summary,
    StudyTool.TEXTUAL_MIND_MAP: format_mind_map,
    StudyTool.DIAGRAM_SUGGESTIONS: format_diagram_suggestions,
    StudyTool.MNEMONICS: format_mnemonics,
    StudyTool.QUIZ: format_quiz,
    StudyTool.VISUAL_RESOURCES: format_visual_resources,
    StudyTool.EXTRA_TIPS: format_extra_tips,
}


def format_tool_view(materials: Optional[StudyMaterials], tool: Optional[StudyTool]) -> str:
    """
    Render the selected section of the materials.

    Args:
        materials: Fetched materials, or None
        tool: Selected view, or None

    Returns:
        Markdown for the view, or a neutral placeholder when nothing is selected
    """
    if materials is None or tool is None:
        return NO_TOOL_PLACEHOLDER

    tool = StudyTool(tool)
    body = _RENDERERS[tool](materials)
    return f"### {TOOL_ICONS[tool]} {tool.value}\n\n{body}"


def tool_choices() -> List[str]:
    """Labels for the tool selector, in display order."""
    return [tool.value for tool in StudyTool]
