"""
Pytest configuration and fixtures
"""
import asyncio
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from study_assistant.core.schemas import StudyMaterials


def make_materials_data(question_count: int = 3, with_resources: bool = True) -> dict:
    """Raw study document as the model returns it (camelCase keys)."""
    data = {
        "detailedSummary": "Mitosis is the process by which a eukaryotic cell divides its nucleus.",
        "textualMindMap": "Mitosis\n├─ Prophase\n├─ Metaphase\n├─ Anaphase\n└─ Telophase",
        "diagramSuggestions": [
            {
                "name": "Cell cycle wheel",
                "description": "Circle split into interphase and the mitotic phases.",
                "steps": ["Draw a circle", "Split it into G1, S, G2 and M", "Label each phase"],
            }
        ],
        "mnemonics": ["PMAT: Prophase, Metaphase, Anaphase, Telophase"],
        "multipleChoiceQuestions": [
            {
                "question": f"Question {i + 1}?",
                "options": {"A": "Prophase", "B": "Metaphase", "C": "Anaphase", "D": "Telophase"},
                "correctAnswerKey": "B",
                "explanation": "Chromosomes line up at the metaphase plate.",
            }
            for i in range(question_count)
        ],
        "extraTips": ["Don't confuse mitosis with meiosis."],
    }
    if with_resources:
        data["visualResources"] = [
            {"title": "Mitosis animation", "url": "https://www.youtube.com/results?search_query=mitosis", "type": "video"},
            {"title": "Mitosis diagram", "url": "https://commons.wikimedia.org/wiki/Mitosis", "type": "image"},
        ]
    return data


class FakeStudyService:
    """
    Study service double whose calls resolve only when the test says so.

    Each generate() call is recorded with its own future; tests resolve or
    fail them in any order.
    """

    def __init__(self):
        self.calls = []

    async def generate(self, subject, topic):
        future = asyncio.get_running_loop().create_future()
        self.calls.append({"subject": subject, "topic": topic, "future": future})
        return await future

    def resolve(self, index, materials):
        self.calls[index]["future"].set_result(materials)

    def fail(self, index, error):
        self.calls[index]["future"].set_exception(error)


@pytest.fixture
def materials_data():
    return make_materials_data()


@pytest.fixture
def materials():
    return StudyMaterials.model_validate(make_materials_data())


@pytest.fixture
def fake_service():
    return FakeStudyService()


@pytest.fixture
def materials_factory():
    """Build validated StudyMaterials with a chosen number of quiz questions."""
    def _make(question_count: int = 3, with_resources: bool = True) -> StudyMaterials:
        return StudyMaterials.model_validate(make_materials_data(question_count, with_resources))
    return _make
