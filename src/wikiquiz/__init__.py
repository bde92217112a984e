# ABOUTME: Wiki Quiz - heuristic multiple-choice quizzes from Wikipedia articles
# ABOUTME: Extraction, entity heuristics, quiz synthesis and cached persistence

__version__ = "0.1.0"
