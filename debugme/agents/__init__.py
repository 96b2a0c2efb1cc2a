from .tutor_agent import TutorConversation, TutorSnapshot, build_system_prompt, send_message

__all__ = ["TutorConversation", "TutorSnapshot", "build_system_prompt", "send_message"]
