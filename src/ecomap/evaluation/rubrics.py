"""Rubrics for the deterministic scorer and the context-aware evaluator."""

# Deterministic rubric: four categories whose ceilings sum to 1000.
RUBRIC_CATEGORIES = {
    "trees": {
        "ceiling": 300,
        "quantity": {"optimal": 50, "points": 150},  # trees placed
        "distribution": {"optimal": 5, "points": 150},  # clusters
        "recommend_below": 150,
        "recommendation": "Add more trees for better air quality and carbon absorption",
    },
    "solar": {
        "ceiling": 250,
        "quantity": {"optimal": 30, "points": 150},  # panels placed
        "distribution": {"per_cluster": 20, "points": 100},
        "recommend_below": 125,
        "recommendation": "Increase solar panel coverage for renewable energy",
    },
    "pavement": {
        "ceiling": 250,
        "quantity": {"optimal": 20, "points": 250},  # pavement points
        "recommend_below": 125,
        "recommendation": "Use more permeable pavement to reduce water runoff",
    },
    "parks": {
        "ceiling": 200,
        "quantity": {"optimal": 4, "points": 120},  # parks placed
        "presence_bonus": 80,
        "recommend_below": 100,
        "recommendation": "Create more green spaces for community wellbeing",
    },
}

MAX_TOTAL_SCORE = sum(c["ceiling"] for c in RUBRIC_CATEGORIES.values())

# Inclusive lower bounds, checked highest first.
FEEDBACK_BANDS = [
    (900, "Outstanding", "🌟 Outstanding! Your sustainability plan is exceptional. "),
    (750, "Excellent", "🌿 Excellent work! Your design shows strong environmental awareness. "),
    (600, "Good", "✅ Good effort! Your plan has solid sustainability features. "),
    (400, "Fair", "⚠️ Fair attempt. There's room for improvement. "),
    (0, "Needs work", "❌ Needs work. Consider adding more sustainability features. "),
]


# Context-aware rubric, judged by a text-generation provider.
EVALUATION_DIMENSIONS = {
    "relevance": {
        "weight": 0.50,
        "max_points": 500,
        "description": "How directly the placements address the key issues named in the location analysis",
        "guidance": [
            "Flooding or stormwater issues: permeable pavement is most relevant",
            "Urban heat issues: trees and parks are most relevant",
            "Energy cost or grid issues: solar panels are most relevant",
            "Air quality issues: trees are most relevant",
            "If the analysis says the area already has plenty of a feature (e.g. many parks), adding more of it earns LESS relevance credit, not more",
            "Placements unrelated to any stated issue should sharply reduce this score",
        ],
    },
    "quantity": {
        "weight": 0.25,
        "max_points": 250,
        "description": "Whether the number of interventions suits the area",
        "guidance": [
            "Too few interventions score low",
            "A balanced amount scores high",
            "Piling everything into one type scores moderately",
        ],
    },
    "diversity": {
        "weight": 0.15,
        "max_points": 150,
        "description": "Variety of intervention types used",
        "guidance": [
            "Several intervention types score high",
            "A single type scores low",
        ],
    },
    "distribution": {
        "weight": 0.10,
        "max_points": 100,
        "description": "How well the placements are spread across the area",
        "guidance": [
            "Use the cluster and placement centers to judge spread",
            "Concentrated placements score lower than well-spread ones",
        ],
    },
}

EVALUATION_FEEDBACK_FIELDS = ("whatWorked", "whatDidntWork", "optimalSolution")


def format_rubric_for_prompt() -> str:
    """Format the evaluator rubric for inclusion in the LLM prompt."""
    lines = []
    for dim, config in EVALUATION_DIMENSIONS.items():
        lines.append(
            f"\n## {dim.upper()} ({int(config['weight'] * 100)}% weight, "
            f"0-{config['max_points']} points)"
        )
        lines.append(f"{config['description']}\n")
        for item in config["guidance"]:
            lines.append(f"  - {item}")
    return "\n".join(lines)
