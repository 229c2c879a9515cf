from __future__ import annotations

import argparse
import sys
from pathlib import Path

from tag_pages.config import TagPageConfig, load_config
from tag_pages.errors import ConfigError, InvalidTagInput, TagPageError
from tag_pages.io.workspace import VaultWorkspace
from tag_pages.logging import get_logger
from tag_pages.pipeline.tag_page import build_tag_page, create_tag_page, refresh_tag_page

log = get_logger()

SETTINGS_FILE = ".tag-pages.json"

def _add_common(p: argparse.ArgumentParser) -> None:
    p.add_argument("vault", help="Path to the vault")
    p.add_argument("--config", default=None, help=f"Settings file (default: <vault>/{SETTINGS_FILE})")
    p.add_argument("--tag-page-dir", default=None, help="Folder holding tag pages (default: Tags)")
    p.add_argument("--frontmatter-property", default=None, help="Frontmatter key that pulls a note onto a tag page")
    p.add_argument("--plain-sub-items", action="store_true", help="Indent matching lines without bullets")
    p.add_argument("--no-lines", action="store_true", help="List note links only")

def _config(args, vault: Path) -> TagPageConfig:
    settings = Path(args.config).expanduser().resolve() if args.config else vault / SETTINGS_FILE
    if args.config and not settings.exists():
        raise ConfigError(f"settings file not found: {settings}")
    cfg = load_config(settings)
    return cfg.with_overrides(
        tag_page_dir=args.tag_page_dir,
        frontmatter_query_property=args.frontmatter_property,
        bulleted_sub_items=False if args.plain_sub_items else None,
        include_lines=False if args.no_lines else None,
    )

def main(argv=None) -> int:
    p = argparse.ArgumentParser(prog="tag-pages")
    sub = p.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("create", help="Create (or open) the tag page for a tag")
    _add_common(c)
    c.add_argument("tag", help="Tag, with or without the leading '#'")

    r = sub.add_parser("refresh", help="Regenerate an existing tag page")
    _add_common(r)
    r.add_argument("page", help="Tag page path, relative to the vault")

    s = sub.add_parser("show", help="Print the tag page for a tag without writing it")
    _add_common(s)
    s.add_argument("tag", help="Tag, with or without the leading '#'")

    args = p.parse_args(argv)

    vault = Path(args.vault).expanduser().resolve()
    if not vault.is_dir():
        log.error(f"vault not found: {vault}")
        return 2

    try:
        cfg = _config(args, vault)
    except ConfigError as e:
        log.error(str(e))
        return 2

    try:
        if args.cmd == "create":
            res = create_tag_page(VaultWorkspace(vault), args.tag, cfg)
            log.info(f"done: path={res.path} created={res.created}")
            return 0

        if args.cmd == "refresh":
            page = Path(args.page)
            if page.is_absolute():
                page = page.resolve().relative_to(vault)
            ws = VaultWorkspace(vault, active=page.as_posix())
            res = refresh_tag_page(ws, cfg)
            if not res.refreshed:
                log.error(f"not a tag page under {cfg.tag_page_dir}/, refusing to overwrite: {res.path}")
                return 1
            log.info(f"done: path={res.path} tag={res.tag} changed={res.changed}")
            return 0

        result = build_tag_page(VaultWorkspace(vault), args.tag, cfg)
        sys.stdout.write(result.content)
        return 0
    except InvalidTagInput as e:
        log.error(f"invalid tag: {e}")
        return 2
    except (TagPageError, ValueError, OSError) as e:
        log.error(str(e))
        return 1

if __name__ == "__main__":
    raise SystemExit(main())
