"""Pytest configuration and shared fixtures."""
import os

import pytest

os.environ.setdefault("OPENAI_API_KEY", "test-key-fake")


EXAMPLE_ENHANCEMENT = """### 1. Feedback on original ILO
Measurable: Accuracy threshold is explicit.
Specific: The task is clear.

### 2. Enhanced ILO
By the end of this tutorial, MATH1012 students will be able to compute limits of complex functions.

### 3. Explanation of changes
B (Behavior): Narrowed the task.

### 4. Closing thought
Review AI suggestions critically before use."""


@pytest.fixture
def sample_ilo():
    """The worked example from the MATH1012 tutorial."""
    from ilo.models import ILO

    ilo = ILO()
    ilo.set_field("audience", "MATH1012 students")
    ilo.set_field("behavior.verbAndTask", "compute limits of complex functions")
    ilo.set_field("condition", "given a set of practice problems and a formula sheet")
    ilo.set_field("degree", "with at least 80% accuracy in their solutions")
    return ilo


@pytest.fixture
def sample_enhancement_text():
    """A well-formed four-section enhancement reply."""
    return EXAMPLE_ENHANCEMENT
