from .learner_memory import LearnerMemory, get_learner_memory

__all__ = ["LearnerMemory", "get_learner_memory"]
