# /boltpath/services/mock_data.py

"""
Demo classroom loaded into the store when the application starts.

All records belong to the demo teacher `teacher1`, the id every directory
entry in `session_service` signs in as.
"""

from datetime import date

from ..models.assignment_model import PBLAssignment
from ..models.progress_model import StudentProgress
from ..models.student_model import Student
from .roster_store import RosterStore

DEMO_TEACHER_ID = "teacher1"

STUDENTS = [
    {
        "id": "1",
        "fullName": "Alice Johnson",
        "grade": "10th Grade",
        "phoneNumber": "(555) 123-4567",
        "teacherId": DEMO_TEACHER_ID,
        "learningProfile": {
            "learningStyle": "visual",
            "strengths": ["Critical thinking", "Visual processing", "Collaboration"],
            "challenges": ["Time management", "Written expression"],
            "accommodations": ["Extended time", "Visual aids", "Graphic organizers"],
            "preferredAssessmentMethods": ["Portfolio", "Presentation", "Project-based"],
            "notes": "Excels in group work and benefits from visual supports. Needs scaffolding for written tasks.",
        },
        "emergencyContact": {
            "name": "Sarah Johnson",
            "relationship": "Mother",
            "phone": "(555) 123-4568",
        },
    },
    {
        "id": "2",
        "fullName": "Bob Smith",
        "grade": "9th Grade",
        "phoneNumber": "(555) 987-6543",
        "teacherId": DEMO_TEACHER_ID,
        "learningProfile": {
            "learningStyle": "kinesthetic",
            "strengths": ["Problem-solving", "Hands-on learning", "Leadership"],
            "challenges": ["Attention to detail", "Sitting still for long periods"],
            "accommodations": ["Movement breaks", "Fidget tools", "Standing desk option"],
            "preferredAssessmentMethods": ["Practical demonstration", "Oral presentation"],
            "notes": "Benefits from hands-on activities and frequent movement. Strong leader in group settings.",
        },
    },
]

ASSIGNMENTS = [
    {
        "id": "1",
        "title": "Climate Change Solutions for Our Community",
        "problemStatement": (
            "How can our local community reduce its carbon footprint by 30% within the next "
            "5 years while maintaining economic growth?"
        ),
        "realWorldContext": "Local government has requested student input on sustainable development plans for the city.",
        "learningObjectives": [
            "Analyze environmental data and identify patterns",
            "Research and evaluate renewable energy solutions",
            "Collaborate effectively in diverse teams",
            "Present evidence-based recommendations to stakeholders",
        ],
        "assessmentCriteria": [
            {"criterion": "Research Quality", "weight": 25, "rubric": "Use of credible sources, data analysis, evidence quality"},
            {"criterion": "Problem-Solving", "weight": 30, "rubric": "Innovation, feasibility, impact assessment"},
            {"criterion": "Collaboration", "weight": 20, "rubric": "Team contribution, communication, conflict resolution"},
            {"criterion": "Presentation", "weight": 25, "rubric": "Clarity, organization, audience engagement"},
        ],
        "resources": [
            "EPA Climate Data Portal",
            "Local Environmental Assessment Reports",
            "Expert Interview Contacts",
            "Community Survey Tools",
        ],
        "timeline": [
            {"phase": "Research & Investigation", "duration": "2 weeks",
             "activities": ["Literature review", "Data collection", "Expert interviews"]},
            {"phase": "Solution Development", "duration": "2 weeks",
             "activities": ["Brainstorming", "Feasibility analysis", "Prototype creation"]},
            {"phase": "Implementation Planning", "duration": "1 week",
             "activities": ["Action plan creation", "Stakeholder mapping", "Impact assessment"]},
            {"phase": "Presentation & Reflection", "duration": "1 week",
             "activities": ["Final presentation preparation", "Peer feedback", "Self-reflection"]},
        ],
        "dueDate": date(2025, 9, 15),
        "studentIds": ["1", "2"],
        "teacherId": DEMO_TEACHER_ID,
        "status": "active",
        "collaborationType": "small-groups",
        "skillsFocus": ["Critical thinking", "Research skills", "Environmental literacy", "Public speaking"],
    },
]

PROGRESS = [
    {
        "studentId": "1",
        "assignmentId": "1",
        "currentPhase": 1,
        "completedActivities": ["Literature review", "Data collection"],
        "reflectionNotes": "Finding it challenging to synthesize information from multiple sources",
        "teacherObservations": "Strong visual processing skills evident. Benefits from graphic organizers.",
        "accommodationsUsed": ["Extended time", "Visual aids"],
        "lastUpdated": date(2025, 8, 15),
    },
]


def build_seeded_store() -> RosterStore:
    """Returns a fresh store holding the demo classroom."""
    return RosterStore(
        students=[Student.model_validate(s) for s in STUDENTS],
        assignments=[PBLAssignment.model_validate(a) for a in ASSIGNMENTS],
        progress=[StudentProgress.model_validate(p) for p in PROGRESS],
    )
