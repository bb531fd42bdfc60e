"""
Landing page content
Literal lists rendered by the home page. Accessors hand out copies so a
render never touches the module-level records.
"""

FAQS = [
    {
        "question": "What is Terra Finance Edu?",
        "answer": (
            "An approachable learning site for personal finance. Start with budgeting and saving, "
            "then build confidence in credit, investing, and taxes using clear lessons, "
            "interactive labs, and simple tools."
        ),
    },
    {
        "question": "Who is it for?",
        "answer": (
            "Students, young professionals, parents, and teachers who want practical, "
            "beginner-friendly financial literacy with short lessons and hands-on practice."
        ),
    },
    {
        "question": "Are the learning resources free?",
        "answer": (
            "Core lessons, labs, and tools start free. Printable resources and extended "
            "modules may be added later."
        ),
    },
    {
        "question": "What should I learn first?",
        "answer": (
            "Begin with Budgeting Basics and Emergency Funds, then explore Credit Score "
            "Essentials and our Interest & Growth explainer."
        ),
    },
    {
        "question": "Do you have calculators and planners?",
        "answer": (
            "Yes. Use the Budget Planner, Compound Interest Calculator, and Debt Payoff Helper "
            "to apply lessons right away."
        ),
    },
]

PILLARS = [
    {"title": "Learn", "description": "Plain-language lessons with checklists and examples.", "href": "/"},
    {"title": "Practice", "description": "Interactive labs to reinforce skills with focused exercises.", "href": "/"},
    {"title": "Tools", "description": "Simple calculators and planners to apply what you learn.", "href": "/"},
]

TOPIC_DESCRIPTION = "Read the overview, follow a checklist, and take a short quiz."

TOPICS = [
    {"title": title, "description": TOPIC_DESCRIPTION, "href": "/"}
    for title in (
        "Budgeting Basics",
        "Saving and Goals",
        "Credit Score Essentials",
        "Investing 101",
        "Banking Smart",
        "Taxes Simplified",
    )
]

LABS = [
    {
        "title": "Budgeting Exercise",
        "description": "Sort needs and wants, plan a month, and set a savings target.",
        "href": "/",
    },
    {
        "title": "Interest & Growth Demo",
        "description": "See simple vs compound interest and monthly contributions in action.",
        "href": "/",
    },
]

TOOLS = [
    {
        "title": "Budget Planner",
        "description": "Track income, fixed costs, and flexible spending with savings goals.",
        "href": "/",
    },
    {
        "title": "Compound Interest Calculator",
        "description": "Compare scenarios by rate, time, and contributions. Export results.",
        "href": "/",
    },
    {
        "title": "Debt Payoff Helper",
        "description": "Snowball vs avalanche with timeline previews to reduce interest.",
        "href": "/",
    },
]

AUDIENCES = [
    {
        "title": "Students & young adults",
        "description": "Build early habits and learn how banking, savings, and credit work in real life.",
    },
    {
        "title": "Busy adults",
        "description": "Understand key decisions, reduce stress, and take confident steps with money.",
    },
    {
        "title": "Parents & teachers",
        "description": "Use classroom-friendly lessons and hands-on practice to teach financial literacy.",
    },
]

QUICK_START_STEPS = [
    "Pick a budget method that fits your month",
    "Set an emergency fund target",
    "Preview interest growth in 60 seconds",
]

WHY_IT_WORKS = [
    "Plain-language lessons with step-by-step guidance",
    "Hands-on practice that turns concepts into real skills",
    "Tools that help you take action immediately",
    "Short sessions and steady weekly progress",
]

BADGES = [
    {"label": "Practical", "caption": "Action steps you can use today", "accent": "navy"},
    {"label": "Understandable", "caption": "Plain language and real examples", "accent": "teal"},
    {"label": "Flexible", "caption": "Short sessions and steady progress", "accent": "navy"},
]


def _copy(records):
    return [dict(record) for record in records]


def get_faqs():
    return _copy(FAQS)


def get_pillars():
    return _copy(PILLARS)


def get_topics():
    return _copy(TOPICS)


def get_labs():
    return _copy(LABS)


def get_tools():
    return _copy(TOOLS)


def get_audiences():
    return _copy(AUDIENCES)


def get_badges():
    return _copy(BADGES)


def get_quick_start_steps():
    return list(QUICK_START_STEPS)


def get_why_it_works():
    return list(WHY_IT_WORKS)
