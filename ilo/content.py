"""Static copy for the ABCD wizard: step labels, Bloom levels, tips and loading phrases."""

from enum import Enum


class BloomLevel(str, Enum):
    """Cognitive tiers of Bloom's Taxonomy, lowest to highest."""

    REMEMBERING = "Remembering"
    UNDERSTANDING = "Understanding"
    APPLYING = "Applying"
    ANALYZING = "Analyzing"
    EVALUATING = "Evaluating"
    CREATING = "Creating"


STEPS = ["Audience", "Behavior", "Condition", "Degree", "Review"]
REVIEW_STEP = len(STEPS) - 1

VERB_EXAMPLES = {
    BloomLevel.REMEMBERING: "Define, List, Recall, Identify, Name, Recognize",
    BloomLevel.UNDERSTANDING: "Explain, Describe, Discuss, Interpret, Summarize, Classify",
    BloomLevel.APPLYING: "Apply, Demonstrate, Use, Solve, Implement, Execute",
    BloomLevel.ANALYZING: "Analyze, Compare, Differentiate, Examine, Categorize, Contrast",
    BloomLevel.EVALUATING: "Evaluate, Judge, Justify, Critique, Assess, Recommend",
    BloomLevel.CREATING: "Create, Design, Develop, Formulate, Propose, Construct",
}

GUIDING_QUESTIONS = {
    BloomLevel.REMEMBERING: "Do students need to recall specific information or facts?",
    BloomLevel.UNDERSTANDING: "Should students demonstrate comprehension by explaining concepts in their own words?",
    BloomLevel.APPLYING: "Will students use learned information to solve problems in new situations?",
    BloomLevel.ANALYZING: "Are students expected to break down information and explore relationships between concepts?",
    BloomLevel.EVALUATING: "Should students make judgments about the value or quality of ideas or materials?",
    BloomLevel.CREATING: "Will students synthesize information to produce original work or propose alternative solutions?",
}

TIPS = {
    "Audience": (
        "Specify the course code and be clear about the students' level. For example, "
        "'CHEM1010 students' clearly identifies first-year chemistry students."
    ),
    "Behavior": (
        "1. Choose a cognitive level that matches your learning goals.\n"
        "2. Select an action verb that aligns with the chosen level.\n"
        "3. Specify the task or content students will engage with.\n"
        "4. Ensure the behavior is observable and measurable."
    ),
    "Condition": (
        "Describe the specific circumstances or context in which the learning will be "
        "demonstrated. This often includes tools, resources, or settings."
    ),
    "Degree": (
        "Specify clear, achievable criteria that define successful performance. This could "
        "include accuracy, speed, quality, or quantity metrics."
    ),
    "Review": (
        "Ensure your ILO is SMART: Specific, Measurable, Achievable, Relevant, and Time-bound. "
        "Each component should contribute to a clear, actionable learning outcome."
    ),
}

# Field edited on each input step; the review step edits nothing.
STEP_FIELDS = {
    "Audience": "audience",
    "Behavior": "behavior.verbAndTask",
    "Condition": "condition",
    "Degree": "degree",
}

PLACEHOLDERS = {
    "audience": "e.g. CHEM1010 students",
    "behavior.verbAndTask": "e.g., analyze the environmental impact of renewable energy sources",
    "condition": "e.g. Using common software tools",
    "degree": "e.g. with at least 90% accuracy",
}

LOADING_PHRASES = [
    "Consulting Bloom's Taxonomy...",
    "Sharpening your action verbs...",
    "Checking the conditions...",
    "Measuring the degree of success...",
    "Polishing your learning outcome...",
    "Asking the instructional designers...",
    "Aligning outcomes with assessment...",
]
