# storage/seed.py

"""
Synthetic seed data.

Contacts are generated once at startup; every contact at index i owns i % 5 tasks.
All randomness comes from the injected random.Random so a fixed seed reproduces
the same dataset.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta

from ..contacts.contact_models import Contact
from ..tasks.task_models import Task

FIRST_NAMES = (
    "Alex", "Alice", "Bob", "Charlie", "Diana", "Eve", "Frank", "Grace", "Henry", "Ivy",
    "Jack", "Karen", "Leo", "Mia", "Noah", "Olivia", "Paul", "Quinn", "Rachel", "Sam",
    "Tina", "Uma", "Victor", "Wendy", "Xavier", "Yara", "Zane", "Amy", "Ben", "Cara",
    "Dan", "Emma", "Finn", "Gina", "Hugo", "Isla", "Jake", "Kate", "Luke", "Maya",
    "Nick", "Ora", "Pete", "Quinn", "Rosa", "Sean", "Tara", "Uma", "Vince", "Will",
)

LAST_NAMES = (
    "Anderson", "Brown", "Davis", "Garcia", "Harris", "Jackson", "Johnson", "Jones", "Lee",
    "Martinez", "Miller", "Moore", "Robinson", "Smith", "Taylor", "Thompson", "Walker",
    "White", "Williams", "Wilson", "Adams", "Baker", "Clark", "Collins", "Evans", "Green",
    "Hall", "Hill", "King", "Lewis", "Martin", "Martinez", "Mitchell", "Nelson", "Parker",
    "Phillips", "Roberts", "Rodriguez", "Scott", "Stewart", "Turner", "Ward", "Watson",
    "Wright", "Young", "Allen", "Carter", "Cooper", "Flores", "Gomez",
)

COMPANIES = (
    "Tech Corp", "Design Studio", "Consulting Group", "Marketing Agency", "Finance Inc",
    "Healthcare LLC", "Education Hub", "Retail Co", "Food Services", "Transportation Ltd",
    "Innovation Labs", "Creative Solutions", "Digital Ventures", "Global Enterprises",
    "Future Systems", "Smart Technologies", "Premium Services", "Elite Consulting",
    "Advanced Solutions", "NextGen Industries",
)

DOMAINS = (
    "email.com", "gmail.com", "yahoo.com", "outlook.com", "company.com",
    "business.com", "corp.net", "enterprise.io", "digital.com", "tech.org",
)

# (title, description)
TASK_TEMPLATES: tuple[tuple[str, str | None], ...] = (
    ("Follow up on project proposal", None),
    ("Schedule meeting", "Discuss quarterly goals"),
    ("Review contract", "Legal review needed"),
    ("Send thank you note", None),
    ("Book travel arrangements", "Conference in Q2"),
    ("Prepare presentation", "Q4 results review"),
    ("Update project timeline", None),
    ("Conduct market research", "Competitor analysis"),
    ("Schedule team training", None),
    ("Review budget proposal", "Financial planning"),
)

CONTACTS_EPOCH = datetime(2024, 1, 1)
TASKS_ANCHOR = datetime(2024, 12, 31)


def generate_contacts(count: int = 10000, rng: random.Random | None = None) -> list[Contact]:
    rng = rng or random.Random()
    contacts: list[Contact] = []

    for i in range(count):
        first = rng.choice(FIRST_NAMES)
        last = rng.choice(LAST_NAMES)
        domain = rng.choice(DOMAINS)
        company = rng.choice(COMPANIES)

        email_base = f"{first.lower()}.{last.lower()}"
        email = f"{email_base}{i}@{domain}" if i > 0 else f"{email_base}@{domain}"

        area_code = str(200 + (i % 800))
        phone_num = str(1000 + (i % 9000))
        phone_last = str(1000 + ((i * 17) % 9000))

        contacts.append(
            Contact(
                id=f"contact-{i + 1}",
                name=f"{first} {last}",
                email=email,
                phone=f"+1-{area_code}-{phone_num[:3]}-{phone_last[:4]}",
                company=company,
                created_at=CONTACTS_EPOCH + timedelta(days=i % 365),
            )
        )

    return contacts


def generate_tasks(contacts: list[Contact], rng: random.Random | None = None) -> list[Task]:
    rng = rng or random.Random()
    tasks: list[Task] = []

    for index, contact in enumerate(contacts):
        for _ in range(index % 5):
            title, description = rng.choice(TASK_TEMPLATES)
            days_ago = rng.randrange(90)
            created_at = TASKS_ANCHOR - timedelta(days=days_ago)
            updated_at = created_at + timedelta(days=rng.randrange(5))

            tasks.append(
                Task(
                    id=f"task-{len(tasks) + 1}",
                    contact_id=contact.id,
                    title=title,
                    description=description,
                    completed=rng.random() > 0.6,
                    created_at=created_at,
                    updated_at=updated_at,
                )
            )

    return tasks
