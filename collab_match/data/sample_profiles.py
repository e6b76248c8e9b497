"""
Sample community profiles.

A small pool of community members used for demos, the CLI's default
pool and tests. ``get_sample_profiles`` returns fresh copies so callers
can record outcomes without affecting each other.
"""

from typing import Any

from collab_match.data.models import CandidateProfile

SAMPLE_PROFILES: list[dict[str, Any]] = [
    {
        "id": "profile-1",
        "user_name": "Alex Rivera",
        "user_email": "alex.rivera@community.org",
        "skills": [
            {"skill": "Community Organizing", "level": "expert", "experience": "8 years organizing housing justice campaigns", "verified": True},
            {"skill": "Event Planning", "level": "advanced", "experience": "5 years coordinating community events", "verified": True},
            {"skill": "Grant Writing", "level": "intermediate", "experience": "Secured $50K+ in community grants", "verified": False},
        ],
        "interests": ["Housing Justice", "Racial Equity", "Community Development"],
        "availability": "10-15 hours/week",
        "preferred_commitment": "3-6 months",
        "location": "Oakland, CA",
        "bio": "Experienced community organizer passionate about housing justice and equitable development.",
    },
    {
        "id": "profile-2",
        "user_name": "Jordan Kim",
        "user_email": "jordan@techforgood.net",
        "skills": [
            {"skill": "Web Development", "level": "advanced", "experience": "6 years full-stack development", "verified": True},
            {"skill": "UI/UX Design", "level": "intermediate", "experience": "3 years designing community platforms", "verified": True},
            {"skill": "Data Analysis", "level": "advanced", "experience": "Analytics for 10+ social impact projects", "verified": False},
        ],
        "interests": ["Digital Equity", "Community Tech", "Data Justice"],
        "availability": "5-10 hours/week",
        "preferred_commitment": "2-4 months",
        "location": "Remote",
        "bio": "Tech professional dedicated to building digital tools that serve community needs.",
    },
    {
        "id": "profile-3",
        "user_name": "Maya Patel",
        "user_email": "maya.patel@wellness.coop",
        "skills": [
            {"skill": "Mental Health Counseling", "level": "expert", "experience": "12 years trauma-informed therapy", "verified": True},
            {"skill": "Workshop Facilitation", "level": "advanced", "experience": "Led 100+ community healing circles", "verified": True},
            {"skill": "Curriculum Development", "level": "intermediate", "experience": "Developed culturally responsive programs", "verified": False},
        ],
        "interests": ["Mental Health", "Healing Justice", "Wellness Initiatives"],
        "availability": "8-12 hours/week",
        "preferred_commitment": "6+ months",
        "location": "Chicago, IL",
        "bio": "Licensed therapist specializing in community-based mental health and healing justice.",
    },
    {
        "id": "profile-4",
        "user_name": "Carlos Mendoza",
        "user_email": "carlos.mendoza@cooperativa.mx",
        "skills": [
            {"skill": "Financial Planning", "level": "advanced", "experience": "7 years cooperative business development", "verified": True},
            {"skill": "Project Management", "level": "expert", "experience": "Managed 20+ community infrastructure projects", "verified": True},
            {"skill": "Spanish Translation", "level": "expert", "experience": "Native bilingual speaker", "verified": True},
        ],
        "interests": ["Economic Justice", "Cooperative Development", "Immigrant Rights"],
        "availability": "15-20 hours/week",
        "preferred_commitment": "6+ months",
        "location": "Phoenix, AZ",
        "bio": "Cooperative development specialist focused on building community wealth and economic democracy.",
    },
    {
        "id": "profile-5",
        "user_name": "Zara Johnson",
        "user_email": "zara@artivism.collective",
        "skills": [
            {"skill": "Graphic Design", "level": "advanced", "experience": "5 years movement visual identity", "verified": True},
            {"skill": "Social Media Strategy", "level": "intermediate", "experience": "Grew campaign reach 300%", "verified": False},
            {"skill": "Photography", "level": "intermediate", "experience": "Documented 50+ community actions", "verified": False},
        ],
        "interests": ["Visual Storytelling", "Cultural Arts", "Movement Media"],
        "availability": "6-10 hours/week",
        "preferred_commitment": "2-6 months",
        "location": "Atlanta, GA",
        "bio": "Visual artist and communications strategist amplifying community voices through design.",
    },
]


def get_sample_profiles() -> list[CandidateProfile]:
    """Build fresh CandidateProfile instances for the sample pool."""
    return [CandidateProfile.model_validate(data) for data in SAMPLE_PROFILES]
