"""
Run orchestration and progress tracking
"""
