"""
Forest adoption form handling.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, Union

from .api import APIError, WysycsAPIClient
from .i18n import Translator
from .models import AdoptionRequest

logger = logging.getLogger(__name__)


@dataclass
class AdoptionForm:
    guardian_name: str = ""
    guardian_email: str = ""
    telegram_chat_id: str = ""

    def is_complete(self) -> bool:
        return bool(self.guardian_name.strip()) and bool(self.guardian_email.strip())


@dataclass
class AdoptionOutcome:
    success: bool
    error: Optional[str] = None
    guardian_email: Optional[str] = None
    response: Optional[Dict] = None


def submit_adoption(
    client: WysycsAPIClient,
    forest_id: Union[int, str],
    form: AdoptionForm,
    translator: Optional[Translator] = None,
) -> AdoptionOutcome:
    """
    Validate the form and send the adoption request.

    An incomplete form never reaches the API. Server errors surface their
    ``detail`` message when one is provided.
    """
    translator = translator or Translator()

    if not form.is_complete():
        return AdoptionOutcome(success=False, error=translator.t("adoption.error.required"))

    request = AdoptionRequest(
        forest_id=forest_id,
        guardian_name=form.guardian_name.strip(),
        guardian_email=form.guardian_email.strip(),
        telegram_chat_id=form.telegram_chat_id.strip() or None,
    )

    try:
        response = client.adoption.adopt_forest(request)
    except APIError as e:
        logger.error(f"Adoption of forest {forest_id} failed: {e}")
        message = e.detail or str(e) or translator.t("adoption.error.unknown")
        return AdoptionOutcome(success=False, error=message)

    return AdoptionOutcome(success=True, guardian_email=request.guardian_email, response=response)
