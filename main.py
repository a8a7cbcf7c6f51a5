"""Main entry point for skillbook."""

import argparse
import asyncio
import importlib.metadata

from config import Config
from skills import (
    ChapterRef,
    PromptAssembler,
    ReferenceLoader,
    ReferenceNotFound,
    SkillsRegistry,
    check_numbering,
    render_skills_section,
)
from skills.parser import find_invocations
from utils import get_log_file_path, get_logger, setup_logger, terminal_ui
from utils.runtime import ensure_runtime_dirs

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skillbook",
        description="Load Java best-practice skills and assemble prompt context",
    )

    try:
        version = importlib.metadata.version("skillbook")
    except importlib.metadata.PackageNotFoundError:
        version = "dev"
    parser.add_argument("--version", "-V", action="version", version=f"skillbook {version}")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose logging to ~/.skillbook/logs/",
    )
    parser.add_argument(
        "--skills-dir",
        type=str,
        default=None,
        help="Directory of user skills (default: SKILLS_DIR from ~/.skillbook/config)",
    )
    parser.add_argument(
        "--no-bundled",
        action="store_true",
        help="Do not load the bundled skills",
    )

    sub = parser.add_subparsers(dest="command", metavar="command")

    sub.add_parser("list", help="List available skills")

    show = sub.add_parser("show", help="Show a skill's checklist")
    show.add_argument("skill", help="Skill name (exact match)")
    show.add_argument("--raw", action="store_true", help="Print the SKILL.md body as-is")
    show.add_argument("--item", type=int, default=None, help="Show only this checklist item")

    ref = sub.add_parser("ref", help="Show a reference chapter of a skill")
    ref.add_argument("skill", help="Skill name (exact match)")
    ref.add_argument("chapter", help="Chapter id, file name or number (e.g. 07-methods or 7)")
    ref.add_argument("--raw", action="store_true", help="Print the Markdown source as-is")

    assemble = sub.add_parser("assemble", help="Assemble a prompt from a request, skills and chapters")
    assemble.add_argument("request", help="User request; $skill-name tokens pull in that skill")
    assemble.add_argument(
        "--skill",
        "-s",
        action="append",
        default=[],
        help="Skill checklist to include (repeatable)",
    )
    assemble.add_argument(
        "--ref",
        "-r",
        action="append",
        default=[],
        help="Reference chapter to include as <skill>/<chapter> (repeatable)",
    )

    check = sub.add_parser("check", help="Validate checklist numbering and reference links")
    check.add_argument("skill", nargs="?", help="Only check this skill")

    sub.add_parser("prompt", help="Print the skills section for a system prompt")

    return parser


async def _cmd_list(registry: SkillsRegistry, args) -> int:
    skills = registry.list_skills()
    if not skills:
        terminal_ui.print_warning(f"No skills found (looked in {registry.skills_dir})")
        return 0
    terminal_ui.print_skills_table([(s.name, s.source, s.description) for s in skills])
    return 0


async def _cmd_show(registry: SkillsRegistry, args) -> int:
    skill = await registry.get_skill(args.skill)
    if args.item is not None:
        entry = skill.entry(args.item)
        if entry is None:
            numbers = ", ".join(str(e.number) for e in skill.checklist)
            terminal_ui.print_error(
                f"Item {args.item} is not in {skill.name}. Items: {numbers}", title="Not Found"
            )
            return 2
        terminal_ui.print_checklist([(entry.number, entry.statement, entry.chapter)])
        return 0
    if args.raw:
        print(skill.body)
        return 0
    terminal_ui.print_header(skill.name, skill.description)
    terminal_ui.print_checklist([(e.number, e.statement, e.chapter) for e in skill.checklist])
    if skill.references:
        terminal_ui.console.print()
        terminal_ui.print_info(f"References: {', '.join(skill.references)}")
    return 0


async def _cmd_ref(registry: SkillsRegistry, args) -> int:
    chapter = await ReferenceLoader(registry).load_reference(args.skill, args.chapter)
    if args.raw:
        print(chapter.text)
        return 0
    skill = await registry.get_skill(args.skill)
    covered = skill.entries_for(chapter.chapter)
    if covered:
        terminal_ui.print_info(
            f"{chapter.chapter} covers items {', '.join(str(e.number) for e in covered)}"
        )
    terminal_ui.print_markdown(chapter.text)
    return 0


async def _cmd_assemble(registry: SkillsRegistry, args) -> int:
    try:
        refs = [ChapterRef.parse(value) for value in args.ref]
    except ValueError as e:
        terminal_ui.print_error(str(e), title="Invalid Arguments")
        return 2

    invoked = [name for name in find_invocations(args.request) if name in registry.skills]
    skill_names = [*invoked, *args.skill]
    text = await PromptAssembler(registry).assemble(args.request, skill_names, refs)
    print(text)
    return 0


async def _cmd_check(registry: SkillsRegistry, args) -> int:
    names = [args.skill] if args.skill else [s.name for s in registry.list_skills()]
    loader = ReferenceLoader(registry)
    problems: list[str] = []
    for name in names:
        skill = await registry.get_skill(name)
        problems.extend(check_numbering(skill))
        for chapter_id in skill.references:
            try:
                chapter = await loader.load_reference(name, chapter_id)
            except ReferenceNotFound as e:
                problems.append(f"{name}: {e}")
                continue
            if not chapter.text.strip():
                problems.append(f"{name}: reference '{chapter_id}' is empty")

    if problems:
        terminal_ui.print_error("\n".join(problems), title="Check Failed")
        return 1
    terminal_ui.print_success(f"{len(names)} skill(s) OK")
    return 0


async def _cmd_prompt(registry: SkillsRegistry, args) -> int:
    section = render_skills_section(registry.list_skills())
    if section is None:
        terminal_ui.print_warning("No skills available")
        return 0
    print(section)
    return 0


_COMMANDS = {
    "list": _cmd_list,
    "show": _cmd_show,
    "ref": _cmd_ref,
    "assemble": _cmd_assemble,
    "check": _cmd_check,
    "prompt": _cmd_prompt,
}


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    # Initialize runtime directories (create logs dir only in verbose mode)
    ensure_runtime_dirs(create_logs=args.verbose)

    # Initialize logging only in verbose mode
    if args.verbose:
        setup_logger()

    try:
        Config.validate()
    except ValueError as e:
        terminal_ui.print_error(str(e), title="Configuration Error")
        return 2

    registry = SkillsRegistry(
        skills_dir=args.skills_dir,
        include_bundled=False if args.no_bundled else None,
    )

    async def _run() -> int:
        await registry.load()
        return await _COMMANDS[args.command](registry, args)

    try:
        code = asyncio.run(_run())
    except ReferenceNotFound as e:
        logger.info(f"Lookup failed: {e}")
        terminal_ui.print_error(str(e), title="Not Found")
        code = 2

    log_file = get_log_file_path()
    if args.verbose and log_file:
        terminal_ui.print_log_location(log_file)
    return code


if __name__ == "__main__":
    raise SystemExit(main())
