"""
Study Assistant package.

Provides:
- AI Response Gateway to Gemini (explanations, summaries, quizzes)
- Diagram fence extraction and quiz scoring for callers
- FastAPI service and command-line front ends
"""

__version__ = "0.1.0"
