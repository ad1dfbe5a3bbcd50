"""
Seed data for the in-memory record store.

Stands in for a real data source until one exists. Dates are fixed so the
dashboards render the same numbers on every run.
"""

from datetime import date, datetime
from typing import List

from placement_tracker.schemas.schemas import (
    Application,
    ApplicationStatus,
    Company,
    Interview,
    InterviewType,
    Student,
)


def build_students() -> List[Student]:
    return [
        Student(
            id="1",
            name="John Doe",
            email="john@example.com",
            roll_number="CS2021001",
            department="Computer Science",
            cgpa=8.5,
            skills=["JavaScript", "React", "Node.js"],
            resume="john_doe_resume.pdf",
            applications=[
                Application(
                    id="1",
                    student_id="1",
                    company="Google",
                    position="Software Engineer",
                    application_date=date(2024, 1, 15),
                    status=ApplicationStatus.interview_scheduled,
                    next_step="Technical Interview",
                    next_step_date=date(2024, 2, 1),
                    notes="Focus on system design and algorithms",
                ),
                Application(
                    id="2",
                    student_id="1",
                    company="Microsoft",
                    position="Product Manager",
                    application_date=date(2024, 1, 10),
                    status=ApplicationStatus.shortlisted,
                    next_step="HR Round",
                    next_step_date=date(2024, 1, 30),
                ),
            ],
            interviews=[
                Interview(
                    id="1",
                    student_id="1",
                    company="Google",
                    position="Software Engineer",
                    type=InterviewType.technical,
                    scheduled_date=datetime(2024, 2, 1, 10, 0),
                    location="Virtual - Google Meet",
                    instructions="Have your IDE ready, focus on data structures",
                ),
            ],
        ),
        Student(
            id="2",
            name="Alice Smith",
            email="alice@example.com",
            roll_number="CS2021002",
            department="Computer Science",
            cgpa=9.2,
            skills=["Python", "Machine Learning", "Data Science"],
            resume="alice_smith_resume.pdf",
            applications=[
                Application(
                    id="3",
                    student_id="2",
                    company="Amazon",
                    position="Data Scientist",
                    application_date=date(2024, 1, 12),
                    status=ApplicationStatus.selected,
                ),
            ],
        ),
        Student(
            id="3",
            name="Bob Johnson",
            email="bob@example.com",
            roll_number="ME2021003",
            department="Mechanical Engineering",
            cgpa=7.8,
            skills=["CAD", "SolidWorks", "Manufacturing"],
            resume="bob_johnson_resume.pdf",
            applications=[
                Application(
                    id="4",
                    student_id="3",
                    company="Tesla",
                    position="Mechanical Engineer",
                    application_date=date(2024, 1, 18),
                    status=ApplicationStatus.applied,
                ),
            ],
        ),
    ]


def build_companies() -> List[Company]:
    return [
        Company(
            id="1",
            name="Google",
            description="Leading technology company",
            positions=["Software Engineer", "Product Manager", "Data Scientist"],
            requirements=["Strong programming skills", "Problem-solving", "Team collaboration"],
            package="₹25-30 LPA",
            deadline=date(2024, 2, 15),
        ),
        Company(
            id="2",
            name="Microsoft",
            description="Global technology leader",
            positions=["Software Developer", "Cloud Engineer", "Program Manager"],
            requirements=["Programming expertise", "Cloud technologies", "Leadership skills"],
            package="₹22-28 LPA",
            deadline=date(2024, 2, 20),
        ),
        Company(
            id="3",
            name="Apple",
            description="Consumer electronics and software company",
            positions=["iOS Developer", "Product Manager"],
            requirements=["Strong programming skills", "Problem-solving"],
            package="₹25-30 LPA",
            deadline=date(2024, 2, 15),
        ),
        Company(
            id="4",
            name="Meta",
            description="Social media and technology company",
            positions=["Frontend Engineer", "Data Scientist"],
            requirements=["React/Vue experience", "ML knowledge"],
            package="₹28-35 LPA",
            deadline=date(2024, 2, 20),
        ),
    ]
