"""Demo mentor catalogue used by GET /mentors/demo and `cli.py --demo`.

Availability is laid out over the next ten weekdays so the records always
look bookable. Each entry lists (weekday index, slots).
"""

from datetime import date, timedelta
from typing import Any

DEMO_DAYS = 10

_DEMO_MENTORS: list[dict[str, Any]] = [
    {
        "name": "Sarah Chen",
        "email": "sarah.chen@demo.mentorverse.com",
        "title": "Senior Software Engineer",
        "company": "Google",
        "bio": (
            "I'm a passionate software engineer with 8+ years of experience at Google, specializing in "
            "full-stack development and cloud architecture. I love mentoring junior developers and helping "
            "them navigate their career growth. My expertise spans React, Node.js, Python, and Google Cloud "
            "Platform."
        ),
        "expertise": ["JavaScript", "React", "Node.js", "Python", "Google Cloud", "System Design", "Microservices", "MongoDB"],
        "yearsOfExperience": 8,
        "schedule": [
            (0, ["10:00 AM", "2:00 PM", "4:00 PM"]),
            (1, ["9:00 AM", "11:00 AM", "3:00 PM"]),
            (2, ["1:00 PM", "3:00 PM", "5:00 PM"]),
            (3, ["9:00 AM", "2:00 PM"]),
            (4, ["11:00 AM", "4:00 PM"]),
        ],
    },
    {
        "name": "Marcus Johnson",
        "email": "marcus.johnson@demo.mentorverse.com",
        "title": "Product Manager",
        "company": "Microsoft",
        "bio": (
            "Product management leader with 10+ years of experience building consumer and enterprise products "
            "at Microsoft. I specialize in product strategy, user research, and cross-functional team leadership."
        ),
        "expertise": ["Product Management", "Product Strategy", "User Research", "Data Analysis", "Agile", "Stakeholder Management", "Azure", "Teams"],
        "yearsOfExperience": 10,
        "schedule": [
            (0, ["9:00 AM", "1:00 PM", "3:00 PM"]),
            (2, ["10:00 AM", "2:00 PM", "4:00 PM"]),
            (4, ["11:00 AM", "1:00 PM"]),
            (5, ["9:00 AM", "3:00 PM"]),
            (6, ["2:00 PM", "5:00 PM"]),
        ],
    },
    {
        "name": "Dr. Priya Patel",
        "email": "priya.patel@demo.mentorverse.com",
        "title": "Data Science Manager",
        "company": "Netflix",
        "bio": (
            "Data science leader with PhD in Machine Learning and 7+ years of industry experience. Currently "
            "managing a team of data scientists at Netflix, working on recommendation algorithms and content "
            "optimization."
        ),
        "expertise": ["Machine Learning", "Python", "TensorFlow", "PyTorch", "Data Science", "Statistics", "Deep Learning", "NLP"],
        "yearsOfExperience": 7,
        "schedule": [
            (1, ["2:00 PM", "4:00 PM"]),
            (3, ["10:00 AM", "12:00 PM", "3:00 PM"]),
            (5, ["9:00 AM", "11:00 AM"]),
            (7, ["1:00 PM", "4:00 PM"]),
            (8, ["10:00 AM", "2:00 PM"]),
        ],
    },
    {
        "name": "Alex Rodriguez",
        "email": "alex.rodriguez@demo.mentorverse.com",
        "title": "UX Design Lead",
        "company": "Airbnb",
        "bio": (
            "Creative UX designer with 9+ years of experience crafting user-centered digital experiences. "
            "Currently leading design for Airbnb's host platform."
        ),
        "expertise": ["UX Design", "UI Design", "Figma", "Sketch", "Design Systems", "User Research", "Prototyping", "Design Thinking"],
        "yearsOfExperience": 9,
        "schedule": [
            (0, ["11:00 AM", "1:00 PM", "4:00 PM"]),
            (2, ["9:00 AM", "2:00 PM"]),
            (4, ["10:00 AM", "12:00 PM", "3:00 PM"]),
            (6, ["1:00 PM", "5:00 PM"]),
            (8, ["9:00 AM", "11:00 AM"]),
        ],
    },
    {
        "name": "Jennifer Kim",
        "email": "jennifer.kim@demo.mentorverse.com",
        "title": "DevOps Engineer",
        "company": "Amazon",
        "bio": (
            "DevOps and cloud infrastructure specialist with 6+ years of experience at Amazon Web Services. "
            "I help organizations scale their infrastructure and implement CI/CD best practices."
        ),
        "expertise": ["AWS", "Kubernetes", "Docker", "Terraform", "Jenkins", "CI/CD", "Linux", "Monitoring"],
        "yearsOfExperience": 6,
        "schedule": [
            (1, ["1:00 PM", "3:00 PM", "5:00 PM"]),
            (3, ["9:00 AM", "11:00 AM", "2:00 PM"]),
            (5, ["10:00 AM", "1:00 PM", "4:00 PM"]),
            (7, ["9:00 AM", "3:00 PM"]),
            (9, ["11:00 AM", "2:00 PM"]),
        ],
    },
    {
        "name": "David Thompson",
        "email": "david.thompson@demo.mentorverse.com",
        "title": "Startup Founder & CEO",
        "company": "TechFlow Solutions",
        "bio": (
            "Serial entrepreneur with 12+ years of experience building and scaling startups. Currently CEO of "
            "TechFlow Solutions, a B2B SaaS company."
        ),
        "expertise": ["Entrepreneurship", "Startup Strategy", "Fundraising", "Product Development", "Team Building", "SaaS", "B2B Sales", "Leadership"],
        "yearsOfExperience": 12,
        "schedule": [
            (0, ["9:00 AM", "11:00 AM", "3:00 PM"]),
            (2, ["1:00 PM", "4:00 PM"]),
            (4, ["10:00 AM", "2:00 PM"]),
            (6, ["9:00 AM", "1:00 PM"]),
            (8, ["11:00 AM", "3:00 PM"]),
        ],
    },
    {
        "name": "Lisa Wang",
        "email": "lisa.wang@demo.mentorverse.com",
        "title": "Mobile App Developer",
        "company": "Spotify",
        "bio": (
            "Mobile development expert with 7+ years of experience building iOS and Android applications. "
            "Currently working on Spotify's mobile platform."
        ),
        "expertise": ["iOS Development", "Android Development", "Swift", "Kotlin", "React Native", "Flutter", "Mobile UI/UX", "App Store Optimization"],
        "yearsOfExperience": 7,
        "schedule": [
            (1, ["10:00 AM", "2:00 PM", "4:00 PM"]),
            (3, ["9:00 AM", "1:00 PM", "3:00 PM"]),
            (5, ["11:00 AM", "2:00 PM", "5:00 PM"]),
            (7, ["10:00 AM", "12:00 PM"]),
            (9, ["1:00 PM", "4:00 PM"]),
        ],
    },
    {
        "name": "Robert Martinez",
        "email": "robert.martinez@demo.mentorverse.com",
        "title": "Cybersecurity Architect",
        "company": "Cisco",
        "bio": (
            "Cybersecurity professional with 11+ years of experience protecting enterprise systems and data. "
            "Currently working as a Security Architect at Cisco."
        ),
        "expertise": ["Cybersecurity", "Network Security", "Incident Response", "Risk Assessment", "Compliance", "Penetration Testing", "CISSP", "Security Architecture"],
        "yearsOfExperience": 11,
        "schedule": [
            (0, ["10:00 AM", "1:00 PM", "4:00 PM"]),
            (2, ["9:00 AM", "11:00 AM", "3:00 PM"]),
            (4, ["1:00 PM", "3:00 PM"]),
            (6, ["10:00 AM", "2:00 PM"]),
            (8, ["9:00 AM", "12:00 PM"]),
        ],
    },
    {
        "name": "Emily Davis",
        "email": "emily.davis@demo.mentorverse.com",
        "title": "Marketing Director",
        "company": "HubSpot",
        "bio": (
            "Digital marketing leader with 9+ years of experience in growth marketing, content strategy, and "
            "brand development. Currently directing marketing initiatives at HubSpot."
        ),
        "expertise": ["Digital Marketing", "Content Marketing", "SEO", "Social Media", "Marketing Automation", "Analytics", "Brand Strategy", "Growth Hacking"],
        "yearsOfExperience": 9,
        "schedule": [
            (1, ["9:00 AM", "11:00 AM", "3:00 PM"]),
            (3, ["10:00 AM", "1:00 PM", "4:00 PM"]),
            (5, ["9:00 AM", "12:00 PM", "2:00 PM"]),
            (7, ["11:00 AM", "3:00 PM"]),
            (9, ["10:00 AM", "1:00 PM"]),
        ],
    },
    {
        "name": "Michael Brown",
        "email": "michael.brown@demo.mentorverse.com",
        "title": "Backend Engineer",
        "company": "Stripe",
        "bio": (
            "Backend engineering specialist with 8+ years of experience building scalable financial systems. "
            "Currently working at Stripe on payment processing infrastructure."
        ),
        "expertise": ["Backend Development", "System Design", "PostgreSQL", "Redis", "API Design", "Microservices", "Java", "Distributed Systems"],
        "yearsOfExperience": 8,
        "schedule": [
            (0, ["9:00 AM", "12:00 PM", "3:00 PM"]),
            (2, ["10:00 AM", "1:00 PM", "4:00 PM"]),
            (4, ["11:00 AM", "2:00 PM", "5:00 PM"]),
            (6, ["9:00 AM", "1:00 PM"]),
            (8, ["10:00 AM", "3:00 PM"]),
        ],
    },
]


def upcoming_weekdays(start: date, count: int = DEMO_DAYS) -> list[str]:
    """ISO dates of the next `count` weekdays strictly after `start`."""
    days: list[str] = []
    current = start
    while len(days) < count:
        current += timedelta(days=1)
        if current.weekday() < 5:
            days.append(current.isoformat())
    return days


def get_demo_mentors(today: date | None = None) -> list[dict[str, Any]]:
    """Build fresh demo mentor records with availability keyed by date."""
    dates = upcoming_weekdays(today or date.today())
    mentors = []
    for entry in _DEMO_MENTORS:
        record = {k: v for k, v in entry.items() if k != "schedule"}
        record["expertise"] = list(entry["expertise"])
        record["availability"] = {dates[day]: list(slots) for day, slots in entry["schedule"]}
        mentors.append(record)
    return mentors
