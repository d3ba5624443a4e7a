"""
Main orchestrator for the API doc code generator.

Coordinates the pipeline: Scanner → Classifier → Synthesizer.
Configuration flows from here into each stage, so no stage reads global
tables of its own.
"""

from pathlib import Path
from typing import Optional, Union

from .config import GeneratorConfig
from .normalizer import FragmentNormalizer
from .scanner import DocumentScanner
from .type_phrases import TypePhraseInterpreter
from .classifier import classify_document
from .synthesizer import CodeSynthesizer
from .source import read_document
from .schemas import GeneratedSources
from .logger import get_module_logger, setup_logger

logger = get_module_logger("main")


class CodeGenerator:
    """
    Main orchestrator for code generation.

    1. Scanner: document text → sections (tables)
    2. Classifier: sections → records, unions, operations
    3. Synthesizer: entities → types module + operations module
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        log_level: int = None
    ):
        self.config = config or GeneratorConfig()
        if log_level is not None:
            setup_logger(level=log_level)

        self.interpreter = TypePhraseInterpreter(aliases=self.config.type_aliases)
        self.scanner = DocumentScanner(
            interpreter=self.interpreter,
            normalizer=FragmentNormalizer(base_url=self.config.base_url),
            heading_tag=self.config.heading_tag,
        )
        self.synthesizer = CodeSynthesizer(self.config)

    def generate(self, text: str) -> GeneratedSources:
        """
        Run the pipeline over one document.

        Args:
            text: Full reference document

        Returns:
            GeneratedSources with both module texts
        """
        logger.info("Starting pipeline")

        # Stage 1: Scan
        # Input:  raw document text
        # Output: sections in document order, rows typed by the interpreter
        tables = self.scanner.scan(text)

        # Stage 2: Classify
        # Input:  sections + synthetic unions from config
        # Output: entities, synthetic unions first
        entities = classify_document(tables, self.config.synthetic_unions)

        # Stage 3: Synthesize
        # Input:  entities
        # Output: types module text + operations module text
        sources = self.synthesizer.synthesize(entities)

        logger.info(f"Complete: {sources.entity_count} definitions")
        return sources

    def generate_file(self, file_path: Union[str, Path]) -> GeneratedSources:
        """Generate from a saved HTML file."""
        return self.generate(read_document(file_path))


def generate_sources(text: str, config: Optional[GeneratorConfig] = None) -> GeneratedSources:
    """Convenience function to generate both modules from document text."""
    return CodeGenerator(config=config).generate(text)
