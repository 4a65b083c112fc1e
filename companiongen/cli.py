"""
companiongen CLI - case class 宣言から circe の companion object を生成

Usage:
    echo 'case class Person(age: Int)' | python -m companiongen gen
    python -m companiongen gen --input-file person.scala [--output-file Person.scala]
    python -m companiongen inspect --input-file person.scala [--output-format json]
    python -m companiongen version
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import fire

from companiongen import __version__
from companiongen.backends.circe_companion import render
from companiongen.core.base.errors import ParseError
from companiongen.core.base.ir import CaseClassDecl
from companiongen.core.engine.config_model import GeneratorConfig, load_config
from companiongen.core.engine.parser import parse
from companiongen.core.export.decl_exporter import EXPORT_FORMATS, dump_declaration

logger = logging.getLogger(__name__)


class CompanionGenCLI:
    """companiongen - circe Encoder/Decoder companion object generator"""

    def gen(
        self,
        input_file: str | None = None,
        output_file: str | None = None,
        config: str | None = None,
        split_mode: str | None = None,
        debug: bool = False,
    ) -> None:
        """Generate a companion object for a case class declaration.

        Args:
            input_file: File containing the declaration (default: read one line from stdin)
            output_file: Write the companion object to this file instead of stdout
            config: Path to config YAML
            split_mode: Comma splitting mode ("plain" or "bracket_aware"), overrides config
            debug: Enable debug output
        """
        try:
            settings = self._load_settings(config, split_mode, debug)
            decl = self._read_and_parse(input_file, settings)
            companion = render(decl)

            if output_file:
                out_path = Path(output_file)
                out_path.parent.mkdir(parents=True, exist_ok=True)
                out_path.write_text(companion + "\n")
                print(f"✅ Generated companion object for {decl.name}: {out_path}")
            else:
                print(companion)
        except Exception as e:
            self._fail(e, debug)

    def inspect(
        self,
        input_file: str | None = None,
        output_format: str = "yaml",
        config: str | None = None,
        split_mode: str | None = None,
        debug: bool = False,
    ) -> None:
        """Show the parsed declaration without generating code.

        Args:
            input_file: File containing the declaration (default: read one line from stdin)
            output_format: "yaml" or "json"
            config: Path to config YAML
            split_mode: Comma splitting mode ("plain" or "bracket_aware"), overrides config
            debug: Enable debug output
        """
        try:
            if output_format not in EXPORT_FORMATS:
                raise ValueError(f"Unknown output format: {output_format} (expected one of {', '.join(EXPORT_FORMATS)})")
            settings = self._load_settings(config, split_mode, debug)
            decl = self._read_and_parse(input_file, settings)
            print(dump_declaration(decl, output_format))
        except Exception as e:
            self._fail(e, debug)

    def version(self) -> None:
        """Show version."""
        print(f"companiongen {__version__}")

    def _load_settings(self, config: str | None, split_mode: str | None, debug: bool) -> GeneratorConfig:
        """Load config and apply command line overrides."""
        settings = load_config(config)
        if split_mode is not None:
            settings = GeneratorConfig.model_validate({**settings.model_dump(), "split_mode": split_mode})
        if debug:
            settings = settings.model_copy(update={"log_level": "DEBUG"})
        _configure_logging(settings.log_level_value)
        logger.debug("Settings: %s", settings)
        return settings

    def _read_and_parse(self, input_file: str | None, settings: GeneratorConfig) -> CaseClassDecl:
        """Read declaration text and parse it."""
        if input_file:
            in_path = Path(input_file)
            if not in_path.exists():
                raise FileNotFoundError(f"Input file not found: {in_path}")
            text = in_path.read_text()
        else:
            text = sys.stdin.readline().rstrip()
        return parse(text, split_mode=settings.split_mode)

    def _fail(self, error: Exception, debug: bool) -> None:
        if isinstance(error, ParseError):
            print(f"❌ Error: [{error.stage}] {error}", file=sys.stderr)
        else:
            print(f"❌ Error: {error}", file=sys.stderr)
        if debug:
            traceback.print_exc()
        sys.exit(1)


def _configure_logging(level: int) -> None:
    """ログをstderrに出力（stdoutは生成結果専用）"""
    logging.basicConfig(stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("companiongen").setLevel(level)


def main() -> None:
    """Main CLI entry point."""
    fire.Fire(CompanionGenCLI)


if __name__ == "__main__":
    main()
