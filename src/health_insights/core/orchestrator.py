# ============================================================================
# src/health_insights/core/orchestrator.py
# ============================================================================
"""
Report Orchestrator

This is the MAIN entry point for report analysis.

Flow:
1. Recover text from the uploaded document (PDF text layer or OCR)
2. Extract metrics
3. Extract relations (conditions, medications, symptoms, notes, trends)
4. Generate recommendations
5. Score confidence
6. Assemble the AnalysisResult

A blank transcript stops the pipeline before step 2. Nothing is retried
and no state survives between analyses, so independent documents can be
analysed concurrently.
"""

from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union
import asyncio
import logging
import mimetypes

from ..config import AnalysisSettings, analysis_settings
from ..extractors.text_extractor import TextExtractor
from ..processors.report.metric_extractor import MetricExtractor
from ..processors.report.recommendation_engine import RecommendationEngine
from ..processors.report.relation_extractor import RelationExtractor
from ..utils.exceptions import EmptyTranscriptError
from ..utils.logging import log_performance
from .confidence import ConfidenceScorer
from .models import AnalysisResult

logger = logging.getLogger(__name__)


class ReportOrchestrator:
    """
    Sequences the analysis stages for one document at a time.

    The stage objects hold no per-document state; one orchestrator can
    serve many concurrent analyses.
    """

    def __init__(
        self,
        text_extractor: Optional[TextExtractor] = None,
        settings: Optional[AnalysisSettings] = None,
    ):
        self.settings = settings or analysis_settings
        self.text_extractor = text_extractor or TextExtractor(settings=self.settings)
        self.metric_extractor = MetricExtractor()
        self.relation_extractor = RelationExtractor()
        self.recommendation_engine = RecommendationEngine()
        self.confidence_scorer = ConfidenceScorer()
        self.logger = logging.getLogger(__name__)

    # ========================================================================
    # ENTRY POINTS
    # ========================================================================

    async def analyze_document(self, data: bytes, media_type: str) -> AnalysisResult:
        """
        Analyze an uploaded document.

        Text recovery (OCR is CPU bound) runs in the default executor so
        the event loop stays free for other uploads.

        Args:
            data: Raw document bytes
            media_type: Declared media type ("application/pdf", "image/png", ...)

        Returns:
            AnalysisResult

        Raises:
            UnsupportedMediaTypeError: media type is neither PDF nor image
            ExtractionFailureError: text recovery failed
            EmptyTranscriptError: no text was recovered

        Example:
            result = await orchestrator.analyze_document(pdf_bytes, "application/pdf")
        """
        self.logger.info(
            f"Analyzing {media_type} document ({len(data)} bytes)",
            extra={"media_type": media_type},
        )

        loop = asyncio.get_running_loop()
        extraction = await loop.run_in_executor(
            None, self.text_extractor.extract, data, media_type
        )

        for warning in extraction.warnings:
            self.logger.warning(f"Text recovery: {warning}")

        return self.analyze_text(extraction.text)

    @log_performance(logger, "Transcript analysis")
    def analyze_text(self, transcript: str) -> AnalysisResult:
        """
        Run metric, relation, recommendation and confidence stages on a transcript.

        Raises:
            EmptyTranscriptError: transcript is blank or whitespace-only
        """
        if not transcript or not transcript.strip():
            raise EmptyTranscriptError()

        metrics = self.metric_extractor.extract(transcript)
        relations = self.relation_extractor.extract(transcript, metrics)
        recommendations = self.recommendation_engine.generate(metrics, relations)
        confidence = self.confidence_scorer.score(metrics, relations)

        result = AnalysisResult(
            raw_text=transcript[:self.settings.TRANSCRIPT_PREVIEW_CHARS],
            metrics=metrics,
            relations=relations,
            recommendations=recommendations,
            extracted_at=datetime.now(timezone.utc),
            confidence=confidence,
        )

        self.logger.info(
            f"Analysis complete: {len(metrics)} metrics, "
            f"{len(relations.conditions)} conditions, confidence {confidence:.2f}",
            extra={"metrics_found": list(metrics.present())},
        )
        return result

    async def analyze_file(
        self,
        path: Union[str, Path],
        media_type: Optional[str] = None,
    ) -> AnalysisResult:
        """
        Analyze a document on disk.

        Args:
            path: Path to a PDF or image
            media_type: Declared media type; guessed from the file name if omitted
        """
        path = Path(path)
        if media_type is None:
            media_type, _ = mimetypes.guess_type(path.name)
            self.logger.debug(f"Guessed media type {media_type!r} for {path.name}")

        with open(path, "rb") as f:
            data = f.read()

        return await self.analyze_document(data, media_type or "")


def analyze(data: bytes, media_type: str) -> AnalysisResult:
    """
    Synchronous convenience wrapper around ReportOrchestrator.analyze_document.

    Example:
        result = analyze(Path("report.pdf").read_bytes(), "application/pdf")
    """
    return asyncio.run(ReportOrchestrator().analyze_document(data, media_type))
