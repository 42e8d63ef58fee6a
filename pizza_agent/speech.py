from dataclasses import dataclass
from enum import Enum

import azure.cognitiveservices.speech as speechsdk

from pizza_agent.exception import SpeechError
from pizza_agent.logger import logger

RETRY_PROMPT = "Sorry, I didn't catch that. Please try again."


class Outcome(str, Enum):
    RECOGNIZED = "recognized"
    NO_MATCH = "no_match"
    ERROR = "error"


@dataclass
class Transcript:
    text: str
    outcome: Outcome


def to_transcript(result) -> Transcript:
    """Map a speech SDK recognition result onto a Transcript."""
    if result.reason == speechsdk.ResultReason.RecognizedSpeech:
        return Transcript(result.text, Outcome.RECOGNIZED)
    if result.reason == speechsdk.ResultReason.NoMatch:
        return Transcript("", Outcome.NO_MATCH)
    details = getattr(result, "cancellation_details", None)
    logger.error("Speech recognition failed: %s", getattr(details, "error_details", result.reason))
    return Transcript("", Outcome.ERROR)


class SpeechIO:
    """Microphone in, speaker out, through the Azure Speech service."""

    def __init__(self, settings, recognizer=None, synthesizer=None):
        if recognizer is None or synthesizer is None:
            if not settings.speech_enabled:
                raise SpeechError("AZURE_SPEECH_KEY and AZURE_SPEECH_REGION must be set for voice mode")
            speech_config = speechsdk.SpeechConfig(subscription=settings.speech_key, region=settings.speech_region)
            speech_config.speech_recognition_language = settings.speech_language
            if settings.speech_voice:
                speech_config.speech_synthesis_voice_name = settings.speech_voice
            recognizer = recognizer or speechsdk.SpeechRecognizer(speech_config=speech_config)
            synthesizer = synthesizer or speechsdk.SpeechSynthesizer(speech_config=speech_config)
        self.recognizer = recognizer
        self.synthesizer = synthesizer

    def listen(self) -> Transcript:
        result = self.recognizer.recognize_once_async().get()
        return to_transcript(result)

    def speak(self, text):
        # Fire-and-forget
        self.synthesizer.speak_text_async(text)
