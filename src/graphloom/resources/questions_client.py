# graphloom/resources/questions_client.py
"""Client for questions and their answer options."""

import json
from collections.abc import Sequence
from typing import TYPE_CHECKING

from ..constants import ME
from ..endpoints import OPTIONS, QUESTIONS
from ..envelope import PagedResult
from ..log_config import logger
from ..models import Question, QuestionOption
from ..params import ParameterSet
from ..reading import ReadSpec
from ..registry import EntityKind
from .base import BaseResourceClient

if TYPE_CHECKING:
    from ..client import BaseGraphClient


class QuestionsClient(BaseResourceClient):
    """Client for questions asked by a user.

    A question carries a list of options; each option collects the votes of
    the users who picked it.
    """

    def __init__(self, api_client: "BaseGraphClient"):
        super().__init__(api_client)
        logger.debug("QuestionsClient initialized")

    async def get_questions(
        self, user_id: str = ME, reading: ReadSpec | None = None
    ) -> PagedResult[Question]:
        url = self.urls.object_url(user_id, QUESTIONS, reading)
        return await self._fetch_list(url, EntityKind.QUESTION)

    async def get(
        self, question_id: str, reading: ReadSpec | None = None
    ) -> Question | None:
        url = self.urls.object_url(question_id, reading=reading)
        return await self._fetch_one(url, EntityKind.QUESTION)

    async def create(
        self,
        question: str,
        options: Sequence[str] | None = None,
        allow_new_options: bool = True,
        user_id: str = ME,
    ) -> str:
        """Asks a question and returns its id.

        Args:
            question: The question text.
            options: Initial answer options, if any.
            allow_new_options: Whether other users may add options.
            user_id: The user asking.
        """
        params = ParameterSet.of(
            ("question", question), ("allow_new_options", allow_new_options)
        )
        if options:
            params = params.add("options", json.dumps(list(options)))
        url = self.urls.object_url(user_id, QUESTIONS)
        return await self._post_for_id(url, params)

    async def delete(self, question_id: str) -> bool:
        logger.info(f"Deleting question {question_id}")
        return await self._delete(self.urls.object_url(question_id))

    async def get_options(
        self, question_id: str, reading: ReadSpec | None = None
    ) -> PagedResult[QuestionOption]:
        url = self.urls.object_url(question_id, OPTIONS, reading)
        return await self._fetch_list(url, EntityKind.QUESTION_OPTION)

    async def add_option(self, question_id: str, option: str) -> str:
        """Adds an answer option and returns the option id."""
        url = self.urls.object_url(question_id, OPTIONS)
        return await self._post_for_id(url, ParameterSet.of(option=option))

    async def get_option_votes(
        self, question_id: str
    ) -> PagedResult[QuestionOption]:
        """Options of a question with only their ``votes`` selected."""
        return await self.get_options(question_id, ReadSpec().select("votes"))
