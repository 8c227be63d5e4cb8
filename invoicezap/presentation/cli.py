
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

from invoicezap.config.settings import settings
from invoicezap.container import configure_container, container
from invoicezap.core.catalog.templates import LAYOUT_PRESETS, TEMPLATE_CATEGORIES
from invoicezap.core.models.profile import PartialProfile
from invoicezap.core.models.recommendation import (
    OnboardingQuestion,
    QuestionType,
    ResolvedRecommendation,
)
from invoicezap.core.models.template import LayoutVariant, TemplateCategory, TemplateOrigin
from invoicezap.core.services.onboarding_service import OnboardingService
from invoicezap.core.services.recommender import TemplateRecommender
from invoicezap.core.services.template_registry import TemplateRegistry

logger = logging.getLogger(__name__)


def _print_json(payload) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def _fail(message: str) -> int:
    print(f"Error: {message}", file=sys.stderr)
    return 1


def _parse_profile(raw: Optional[str]) -> PartialProfile:
    if not raw:
        return PartialProfile()
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError("Profile must be a JSON object")
    return PartialProfile.from_dict(data)


def _recommendations_payload(results: list[ResolvedRecommendation]) -> list[dict]:
    return [
        {**r.recommendation.to_dict(), "name": r.template.name}
        for r in results
    ]


def cmd_templates(args: argparse.Namespace) -> int:
    """List templates, optionally filtered."""
    registry = container.resolve(TemplateRegistry)
    templates = registry.find(
        category=TemplateCategory(args.category) if args.category else None,
        search=args.search,
        origin=TemplateOrigin(args.origin) if args.origin else None,
        active_only=args.active_only,
    )
    for template in templates:
        label = TEMPLATE_CATEGORIES[template.category]["name"]
        print(f"{template.id:<24} {template.name:<24} {label:<14} {template.origin.value}")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    template = container.resolve(TemplateRegistry).get_by_id(args.template_id)
    if template is None:
        return _fail(f"Template not found: {args.template_id}")
    _print_json(template.to_dict())
    return 0


def cmd_create(args: argparse.Namespace) -> int:
    """Create a custom template and print it."""
    registry = container.resolve(TemplateRegistry)
    partial = LAYOUT_PRESETS.get(LayoutVariant(args.layout)) if args.layout else None
    template = registry.create(
        args.name,
        partial,
        category=TemplateCategory(args.category),
    )
    if template is None:
        return _fail("Template could not be created")
    _print_json(template.to_dict())
    return 0


def cmd_export(args: argparse.Namespace) -> int:
    payload = container.resolve(TemplateRegistry).export(args.template_id)
    if payload is None:
        return _fail(f"Template not found: {args.template_id}")

    if args.output:
        Path(args.output).write_text(
            json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
        )
        logger.info(f"Exported '{args.template_id}' to {args.output}")
    else:
        _print_json(payload)
    return 0


def cmd_import(args: argparse.Namespace) -> int:
    """Import a template from an exported JSON file."""
    try:
        payload = json.loads(Path(args.file).read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        logger.error(f"Cannot read {args.file}: {e}")
        return _fail("Invalid file format")

    template = container.resolve(TemplateRegistry).import_template(payload)
    if template is None:
        return _fail("Invalid file format")
    _print_json(template.to_dict())
    return 0


def cmd_recommend(args: argparse.Namespace) -> int:
    """Recommend templates for a preset or a JSON profile."""
    onboarding = container.resolve(OnboardingService)

    if args.preset:
        results = onboarding.quick_start(args.preset, args.limit)
        if results is None:
            return _fail(f"Unknown quick-start profile: {args.preset}")
    else:
        try:
            profile = _parse_profile(args.profile)
        except ValueError as e:
            return _fail(f"Invalid profile: {e}")
        results = onboarding.recommend(profile, args.limit)

    _print_json(_recommendations_payload(results))
    return 0


def cmd_suggest(args: argparse.Namespace) -> int:
    try:
        profile = _parse_profile(args.profile)
    except ValueError as e:
        return _fail(f"Invalid profile: {e}")
    _print_json(container.resolve(TemplateRecommender).get_personalized_suggestions(profile))
    return 0


def cmd_questions(args: argparse.Namespace) -> int:
    try:
        profile = _parse_profile(args.profile)
    except ValueError as e:
        return _fail(f"Invalid profile: {e}")
    questions = container.resolve(TemplateRecommender).get_onboarding_questions(profile)
    _print_json([q.to_dict() for q in questions])
    return 0


def cmd_presets(args: argparse.Namespace) -> int:
    recommender = container.resolve(TemplateRecommender)
    _print_json(
        {
            name: recommender.get_quick_start_profile(name).to_dict()
            for name in recommender.list_quick_start_profiles()
        }
    )
    return 0


def _ask(question: OnboardingQuestion, read: Callable[[str], str]) -> list[str]:
    """Ask one question until the answer is valid. Returns option values."""
    print(question.question)
    for i, option in enumerate(question.options, 1):
        print(f"  {i}. {option.icon} {option.label}")

    limit = question.max_selections if question.type is QuestionType.MULTI_CHOICE else 1
    while True:
        raw = read(f"Choose up to {limit} (comma separated): " if limit > 1 else "Choose: ")
        try:
            picks = [int(p) for p in raw.replace(" ", "").split(",") if p]
        except ValueError:
            picks = []
        if picks and len(picks) <= limit and all(1 <= p <= len(question.options) for p in picks):
            return [question.options[p - 1].value for p in dict.fromkeys(picks)]
        print("Invalid choice, try again.")


def cmd_onboard(
    args: argparse.Namespace, read: Optional[Callable[[str], str]] = None
) -> int:
    """Interactive questionnaire followed by recommendations."""
    read = read or input
    recommender = container.resolve(TemplateRecommender)
    onboarding = container.resolve(OnboardingService)
    profile = PartialProfile()

    try:
        while True:
            questions = recommender.get_onboarding_questions(profile)
            if not questions:
                break
            question = questions[0]
            values = _ask(question, read)
            answer = values if question.type is QuestionType.MULTI_CHOICE else values[0]
            profile = profile.answer(question.attribute, answer)

            suggestions = recommender.get_personalized_suggestions(profile)
            if suggestions:
                print(f"Suggested so far: {', '.join(suggestions)}")
    except (EOFError, KeyboardInterrupt):
        return _fail("Onboarding aborted")

    _print_json(_recommendations_payload(onboarding.recommend(profile, args.limit)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="invoicezap", description="Invoice template tools")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("templates", help="List templates")
    p.add_argument("--category", choices=[c.value for c in TemplateCategory])
    p.add_argument("--origin", choices=[o.value for o in TemplateOrigin])
    p.add_argument("--search")
    p.add_argument("--active-only", action="store_true")
    p.set_defaults(handler=cmd_templates)

    p = sub.add_parser("show", help="Show one template")
    p.add_argument("template_id")
    p.set_defaults(handler=cmd_show)

    p = sub.add_parser("create", help="Create a custom template")
    p.add_argument("name")
    p.add_argument("--layout", choices=[v.value for v in LAYOUT_PRESETS])
    p.add_argument(
        "--category",
        choices=[c.value for c in TemplateCategory],
        default=TemplateCategory.PROFESSIONAL.value,
    )
    p.set_defaults(handler=cmd_create)

    p = sub.add_parser("export", help="Export a template as JSON")
    p.add_argument("template_id")
    p.add_argument("--output", "-o")
    p.set_defaults(handler=cmd_export)

    p = sub.add_parser("import", help="Import a template JSON file")
    p.add_argument("file")
    p.set_defaults(handler=cmd_import)

    p = sub.add_parser("recommend", help="Recommend templates")
    group = p.add_mutually_exclusive_group()
    group.add_argument("--preset")
    group.add_argument("--profile", help="Profile as JSON object")
    p.add_argument("--limit", type=int)
    p.set_defaults(handler=cmd_recommend)

    p = sub.add_parser("suggest", help="Quick suggestions for a partial profile")
    p.add_argument("--profile", help="Profile as JSON object")
    p.set_defaults(handler=cmd_suggest)

    p = sub.add_parser("questions", help="Unanswered onboarding questions")
    p.add_argument("--profile", help="Profile as JSON object")
    p.set_defaults(handler=cmd_questions)

    p = sub.add_parser("presets", help="List quick-start profiles")
    p.set_defaults(handler=cmd_presets)

    p = sub.add_parser("onboard", help="Interactive onboarding")
    p.add_argument("--limit", type=int)
    p.set_defaults(handler=cmd_onboard)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point."""
    logging.basicConfig(level=settings.log_level.upper(), format="%(message)s")

    args = build_parser().parse_args(argv)
    configure_container(settings)
    return args.handler(args)


if __name__ == "__main__":
    sys.exit(main())
