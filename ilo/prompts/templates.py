"""
Prompt Template System

Reusable prompt templates with variable interpolation and validation,
plus the default enhancement prompts.
"""

from typing import Any, Optional
from string import Formatter

from ilo.exceptions import PromptTemplateError


class PromptTemplate:
    """Reusable template for generating prompts with {variable} placeholders."""

    def __init__(self, template: str, name: Optional[str] = None):
        self.template = template.strip()
        self.name = name or "unnamed"
        self.required_vars = self._extract_variables()

    def _extract_variables(self) -> set[str]:
        formatter = Formatter()
        variables = set()
        for _, field_name, _, _ in formatter.parse(self.template):
            if field_name is not None:
                base_name = field_name.split(".")[0].split("[")[0]
                if base_name:
                    variables.add(base_name)
        return variables

    def render(self, **kwargs: Any) -> str:
        missing = self.required_vars - set(kwargs.keys())
        if missing:
            raise PromptTemplateError(template_name=self.name, missing_vars=sorted(missing))
        try:
            return self.template.format(**kwargs)
        except KeyError as e:
            raise PromptTemplateError(template_name=self.name, missing_vars=[str(e)]) from e

    def __repr__(self) -> str:
        return f"PromptTemplate(name='{self.name}', vars={self.required_vars})"


# Enhancement prompts

DEFAULT_ENHANCEMENT_SYSTEM_PROMPT = (
    "You are an expert in educational design, specializing in creating effective "
    "Intended Learning Outcomes (ILOs) using the ABCD (Audience, Behavior, Condition, "
    "Degree) method. Your task is to provide constructive feedback on given ILOs and "
    "suggest improvements."
)

# Every section must open with a "### " heading; the wizard splits the reply on them.
DEFAULT_ENHANCEMENT_USER_TEMPLATE = """Provide feedback and enhancement for the following ILO: "{ilo}"

Structure your response as numbered sections, each starting on its own line with a "### " heading:

### 1. Feedback on original ILO
Measurable: [Comment on how well the outcome can be assessed]
Specific: [Evaluate how clearly the ILO states what students should do]
Achievable: [Assess if the outcome is realistic for a tutorial session]
Observable: [Comment on how the learning can be demonstrated]
Appropriate Level: [Evaluate the cognitive level using Bloom's Taxonomy]

### 2. Enhanced ILO
[Provide an improved version of the ILO]

### 3. Explanation of changes
A (Audience): [Any changes to the audience]
B (Behavior): [Changes to the action verb and task]
C (Condition): [Added or modified conditions]
D (Degree): [How measurability was improved]

### 4. Closing thought
[A brief statement encouraging critical evaluation of the AI-generated ILO and reminding not to use it directly without consideration]

Limit your response to 250 words."""


def build_enhancement_template(template: str = DEFAULT_ENHANCEMENT_USER_TEMPLATE) -> PromptTemplate:
    """Wrap a configured user-message template; its only placeholder is `{ilo}`."""
    return PromptTemplate(template, name="enhance_ilo")
