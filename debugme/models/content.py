from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import List, Literal


class QuizQuestion(BaseModel):
    model_config = ConfigDict(frozen=True)

    question: str
    options: List[str] = Field(..., min_length=2)
    correct_answer: int                      # index into options

    @model_validator(mode="after")
    def _answer_is_an_option(self):
        if not 0 <= self.correct_answer < len(self.options):
            raise ValueError(f"correct_answer {self.correct_answer} is not an option index")
        return self


class Lesson(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    description: str = ""
    topic: str
    difficulty: Literal["beginner", "intermediate", "advanced"]
    xp_reward: int = Field(..., gt=0)
    required_level: int = Field(1, ge=1)
    explanation: str
    example: str = ""
    quiz: List[QuizQuestion] = Field(..., min_length=1)


class ChallengeTestCase(BaseModel):
    model_config = ConfigDict(frozen=True)

    input: str
    expected: str


class Challenge(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    title: str
    description: str = ""
    difficulty: Literal["easy", "medium", "hard"]
    xp_reward: int = Field(..., gt=0)
    required_level: int = Field(1, ge=1)
    topic: str
    problem: str
    starter_code: str
    solution: str
    test_cases: List[ChallengeTestCase] = Field(default_factory=list)
    hints: List[str] = Field(default_factory=list)


class Badge(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str
    description: str
