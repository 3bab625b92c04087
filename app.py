# app.py
import argparse
import copy
import json
import logging
import os
import sys
from datetime import datetime

# Import Flask for API (conditionally or always, then check run mode)
try:
    from flask import Flask, request, jsonify
except ImportError:
    Flask = None  # Will prevent API mode if Flask not installed

from texty.analysis import TextAnalyzer
from texty.analysis.scoring import explain_seo_score
from texty.formatting import (
    CASE_TYPES,
    auto_format,
    convert_case,
    extract_formatting,
    format_for_display,
    strip_formatting,
)
from texty.highlight import HighlightDetector, render_highlighted_markup

DEFAULT_CONFIG = {
    "TextAnalyzer": {
        "top_n_keywords_count": 7,
        "min_keyword_frequency": 2,
        "keyword_density_limit": 15,
        "syllable_cache_size": 2000,
    },
    "HighlightDetector": {"complex_sentence_words": 25},
    "Global": {"max_input_chars": 100000, "debug": False},
}

# --- Flask App Setup (if Flask is available) ---
if Flask:
    app = Flask(__name__)
    # Configuration used by the API; replaced when the CLI loads a config file
    flask_app_config = copy.deepcopy(DEFAULT_CONFIG)
else:
    app = None

# Processor shared by API requests so the syllable cache lives as long as the server
api_processor = None


def merge_config(base, overrides):
    """Section-wise merge of `overrides` into a copy of `base`."""
    merged = copy.deepcopy(base)
    for key, value in (overrides or {}).items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key].update(value)
        else:
            merged[key] = value
    return merged


def load_config(path):
    """Loads a JSON config file on top of DEFAULT_CONFIG. Falls back to defaults on errors."""
    if not path:
        return copy.deepcopy(DEFAULT_CONFIG)
    try:
        with open(path, "r") as f:
            custom_config = json.load(f)
        print(f"Loaded custom configuration from {path}")
        return merge_config(DEFAULT_CONFIG, custom_config)
    except FileNotFoundError:
        print(f"Warning: Config file {path} not found. Using default settings.")
    except json.JSONDecodeError:
        print(f"Warning: Error decoding JSON from {path}. Using default settings.")
    return copy.deepcopy(DEFAULT_CONFIG)


def preprocess_text(text, strip=False, tidy=False, case_type=None):
    if strip:
        text = strip_formatting(text)
    if tidy:
        text = auto_format(text)
    if case_type:
        text = convert_case(text, case_type)
    return text


class TextProcessor:
    def __init__(self, config=None, output_format="json"):
        self.config = config if config else copy.deepcopy(DEFAULT_CONFIG)
        self.global_config = self.config.get("Global", {})
        self.max_input_chars = int(self.global_config.get("max_input_chars", 100000))
        self.output_format = output_format
        self.report = {}
        self.analyzer = TextAnalyzer(config=self._module_config("TextAnalyzer"))
        self.detector = HighlightDetector(config=self._module_config("HighlightDetector"))

    def _module_config(self, name):
        module_cfg = dict(self.config.get(name, {}))
        module_cfg["Global"] = self.global_config
        return module_cfg

    def validate_text(self, text):
        if not isinstance(text, str):
            raise ValueError("Text must be a string.")
        if len(text) > self.max_input_chars:
            raise ValueError(
                f"Text is {len(text)} characters long; the limit is {self.max_input_chars}."
            )
        return text

    def analyze_text(self, text):
        return self.analyzer.analyze(self.validate_text(text))

    def highlight_text(self, text, critical_keywords=None):
        """Returns (highlights, markup). Keywords default to the text's critical density entries."""
        self.validate_text(text)
        if critical_keywords is None:
            critical_keywords = self.analyzer.analyze(text).critical_keywords
        highlights = self.detector.detect(text, critical_keywords)
        return highlights, render_highlighted_markup(text, highlights)

    def run_analysis(self, text, critical_keywords=None):
        """
        Core analysis logic, callable by both CLI and API.
        critical_keywords: keywords to mark as overused; defaults to the critical density entries.
        """
        self.validate_text(text)
        self.report = {
            "analysis_timestamp": datetime.now().isoformat(),
            "text_attributes": {},
        }

        stats = self.analyzer.analyze(text)
        self.report["text_attributes"][self.analyzer.get_module_name()] = stats.to_dict()
        self.report["text_attributes"]["SEOScoreBreakdown"] = explain_seo_score(
            stats.keyword_density, stats.flesch_score, stats.writing_style
        )

        if critical_keywords is None:
            critical_keywords = stats.critical_keywords
        highlights = self.detector.detect(text, critical_keywords)
        self.report["text_attributes"][self.detector.get_module_name()] = {
            "highlights": [h.to_dict() for h in highlights],
            "highlightedMarkup": render_highlighted_markup(text, highlights),
        }
        return self.report

    def save_report_to_file(self, filename_prefix="text_report"):
        if not os.path.exists("reports"):
            os.makedirs("reports")
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filename = f"reports/{filename_prefix}_{timestamp}.{self.output_format}"
        try:
            with open(filename, "w") as f:
                if self.output_format == "json":
                    json.dump(self.report, f, indent=4, ensure_ascii=False)
                else:
                    f.write(format_report_text(self.report))
            print(f"Report saved to {filename}")
            return filename
        except IOError as e:
            print(f"Error saving report: {e}")
            return None


def format_report_text(report):
    stats = report.get("text_attributes", {}).get("TextAnalyzer", {})
    breakdown = report.get("text_attributes", {}).get("SEOScoreBreakdown", {})
    lines = [
        f"Timestamp: {report.get('analysis_timestamp')}",
        f"Words: {stats.get('words')} (unique: {stats.get('uniqueWords')})",
        f"Sentences: {stats.get('sentences')}  Paragraphs: {stats.get('paragraphs')}",
        f"Reading time (min): {stats.get('readingTime')}",
        f"Flesch: {stats.get('fleschScore')} ({stats.get('gradeLevel')})",
        f"Keywords: {', '.join(stats.get('keywords', []))}",
        f"SEO score: {stats.get('seoScore')}",
    ]
    lines.extend(f"  - {issue}" for issue in breakdown.get("issues", []))
    return "\n".join(lines) + "\n"


def get_api_processor():
    """Returns the shared API processor, rebuilding it when the API config was replaced."""
    global api_processor
    if api_processor is None or api_processor.config is not flask_app_config:
        api_processor = TextProcessor(config=flask_app_config)
    return api_processor


# --- Flask Routes (if Flask is available) ---
if app:
    def _json_payload():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return None, (jsonify({"error": "Invalid JSON payload"}), 400)
        return data, None

    def _text_field(data, key="text"):
        text = data.get(key)
        if text is None:
            return None, (jsonify({"error": f"'{key}' field is required"}), 400)
        if not isinstance(text, str):
            return None, (jsonify({"error": f"'{key}' must be a string"}), 400)
        limit = int(flask_app_config.get("Global", {}).get("max_input_chars", 100000))
        if len(text) > limit:
            return None, (jsonify({"error": f"Text exceeds the {limit} character limit"}), 413)
        return text, None

    @app.route('/analyze', methods=['POST'])
    def analyze_endpoint():
        data, error = _json_payload()
        if error:
            return error
        text, error = _text_field(data)
        if error:
            return error
        processor = get_api_processor()
        stats = processor.analyze_text(text)
        payload = stats.to_dict()
        payload["seoBreakdown"] = explain_seo_score(stats.keyword_density, stats.flesch_score, stats.writing_style)
        return jsonify(payload)

    @app.route('/highlights', methods=['POST'])
    def highlights_endpoint():
        data, error = _json_payload()
        if error:
            return error
        text, error = _text_field(data)
        if error:
            return error
        keywords = data.get("keywords")
        if isinstance(keywords, str):
            keywords = [kw.strip() for kw in keywords.split(",") if kw.strip()]
        elif keywords is not None and (
            not isinstance(keywords, list) or not all(isinstance(kw, str) for kw in keywords)
        ):
            return jsonify({"error": "'keywords' must be a list of strings or a comma-separated string"}), 400
        processor = get_api_processor()
        highlights, markup = processor.highlight_text(text, keywords)
        return jsonify({"highlights": [h.to_dict() for h in highlights], "markup": markup})

    @app.route('/format', methods=['POST'])
    def format_endpoint():
        data, error = _json_payload()
        if error:
            return error
        text, error = _text_field(data)
        if error:
            return error
        mode = data.get("mode", "strip")
        if mode == "strip":
            result = strip_formatting(text)
        elif mode == "auto":
            result = auto_format(text)
        elif mode in CASE_TYPES:
            result = convert_case(text, mode)
        else:
            return jsonify({"error": f"Unknown mode: {mode}"}), 400
        return jsonify({"text": result, "mode": mode})

    @app.route('/formatting', methods=['POST'])
    def formatting_endpoint():
        data, error = _json_payload()
        if error:
            return error
        html, error = _text_field(data, key="html")
        if error:
            return error
        info = extract_formatting(html)
        return jsonify({
            "formatting": info.to_dict() if info else None,
            "display": format_for_display(info),
        })


def read_input(source):
    if source == "-":
        return sys.stdin.read()
    with open(source, "r", encoding="utf-8") as f:
        return f.read()


def run_cli():
    parser = argparse.ArgumentParser(description="Texty text analyzer")
    parser.add_argument("file", nargs='?', default=None, help="Text file to analyze, '-' for stdin (omit to run in API/server mode).")
    parser.add_argument("--output", choices=["json", "txt"], default="json", help="Output format for the report.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--keywords", nargs="+", default=None, help="Keywords to highlight as overused (default: critical density keywords).")
    parser.add_argument("--highlights", type=str, default=None, help="Write the highlighted HTML markup to this path.")
    parser.add_argument("--strip-formatting", action="store_true", help="Strip HTML/rich-text formatting before analysis.")
    parser.add_argument("--auto-format", action="store_true", help="Tidy spacing, punctuation and capitalisation before analysis.")
    parser.add_argument("--case", choices=list(CASE_TYPES), default=None, help="Convert the text's case before analysis.")
    parser.add_argument("--no-save", action="store_true", help="Print the report instead of saving it under reports/.")

    args = parser.parse_args()

    global flask_app_config
    current_config = load_config(args.config)
    if app:
        flask_app_config = copy.deepcopy(current_config)
    if current_config.get("Global", {}).get("debug"):
        logging.basicConfig(level=logging.DEBUG)

    # If no file is provided, run in API/server mode. Otherwise, run in CLI mode.
    if not args.file:
        if not Flask:
            print("Error: Flask is not installed. Cannot run in API/server mode.")
            print("Please install Flask ('pip install flask') to run as a server, or provide a file to run in CLI mode.")
            parser.print_help()
            return

        default_host = "127.0.0.1"
        default_port = 5000
        print(f"Starting Flask server on http://{default_host}:{default_port}/ (API mode)")
        app.run(host=default_host, port=default_port, debug=False)
        return

    try:
        text = read_input(args.file)
    except OSError as e:
        print(f"Error: could not read {args.file}: {e}")
        return

    text = preprocess_text(text, args.strip_formatting, args.auto_format, args.case)
    try:
        processor = TextProcessor(config=current_config, output_format=args.output)
        report = processor.run_analysis(text, critical_keywords=args.keywords)
    except ValueError as ve:
        print(f"Error: {ve}")
        return

    stats = report["text_attributes"]["TextAnalyzer"]
    print("\n--- Analysis Summary ---")
    print(f"Words: {stats['words']}  Sentences: {stats['sentences']}  Reading time: {stats['readingTime']}")
    print(f"Flesch: {stats['fleschScore']} ({stats['gradeLevel']})  SEO Score: {stats['seoScore']}")

    if args.highlights:
        markup = report["text_attributes"]["HighlightDetector"]["highlightedMarkup"]
        try:
            with open(args.highlights, "w", encoding="utf-8") as f:
                f.write(markup)
            print(f"Highlighted markup saved to {args.highlights}")
        except IOError as e:
            print(f"Error saving highlighted markup: {e}")

    if args.no_save:
        if args.output == "json":
            print(json.dumps(report, indent=2, ensure_ascii=False))
        else:
            print(format_report_text(report))
    else:
        processor.save_report_to_file()


if __name__ == "__main__":
    run_cli()
