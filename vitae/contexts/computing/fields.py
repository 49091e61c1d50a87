"""
Computed Field Composers

Plain functions that derive one display string from raw resume fields. Every
function returns a string already escaped (or marked up) for the target
engine; raw text is escaped exactly once, here.
"""

from typing import Any, Callable, Dict, Iterable, Mapping, Optional

from vitae.contexts.computing.defaults import SECTION_IDS
from vitae.contexts.localization import get_punctuations, get_term, get_terms, is_cjk_locale
from vitae.contexts.richtext import CodeGenerator, Mark, MarkType, parse_summary
from vitae.utils.text_processing import (
    is_empty_value,
    join_non_empty,
    replace_blank_lines_with_percent,
    set_max_consecutive_blank_lines,
    show_if,
    show_if_not_empty,
)

Escaper = Callable[[Optional[str]], str]

# Network name -> Font Awesome brand icon slug
NETWORK_ICONS = {
    "Behance": "behance",
    "Dribbble": "dribbble",
    "Facebook": "facebook",
    "GitHub": "github",
    "Gitlab": "gitlab",
    "Instagram": "instagram",
    "Line": "line",
    "LinkedIn": "linkedin",
    "Medium": "medium",
    "Pinterest": "pinterest",
    "Reddit": "reddit",
    "Snapchat": "snapchat",
    "Stack Overflow": "stack-overflow",
    "Telegram": "telegram",
    "TikTok": "tiktok",
    "Twitch": "twitch",
    "Twitter": "twitter",
    "Vimeo": "vimeo",
    "Weibo": "weibo",
    "WeChat": "weixin",
    "WhatsApp": "whatsapp",
    "YouTube": "youtube",
    "Zhihu": "zhihu",
}

# Separator between header links, spaced to match moderncv's own footer style
LATEX_URLS_SEPARATOR = " {} {} {} • {} {} {} \n"
HTML_URLS_SEPARATOR = " • "
MARKDOWN_URLS_SEPARATOR = " • "


def join_list(items: Iterable[str], locale: Optional[str], escape: Escaper) -> str:
    """
    Join list items with the locale's separator.

    Args:
        items: Raw strings (courses, keywords)
        locale: Locale code
        escape: Escaper for the target engine

    Returns:
        "" for no items, the escaped item for one, otherwise escaped items
        joined by the separator (", " or "、")
    """
    separator = get_punctuations(locale)["separator"]
    return join_non_empty([escape(item) for item in items or []], separator)


def compose_degree_area_and_score(
    item: Mapping[str, Any], locale: Optional[str], escape: Escaper
) -> str:
    """
    Combine localized degree, area and score of an education entry.

    Example:
        >>> compose_degree_area_and_score(
        ...     {"degree": "Master", "area": "Physics", "score": "3.9"}, "en", str
        ... )
        'Master, Physics, Score: 3.9'
    """
    punctuations = get_punctuations(locale)
    score = item.get("score")

    parts = [
        get_term(locale, "degrees", item.get("degree")),
        item.get("area"),
        show_if_not_empty(score, f"{get_terms(locale)['score']}{punctuations['colon']}{score}"),
    ]
    return join_non_empty([escape(part or "") for part in parts], punctuations["comma"])


def compose_full_address(location: Mapping[str, Any], locale: Optional[str], escape: Escaper) -> str:
    """
    Combine the parts of a location into one localized address line.

    Chinese locales go from the most general part to the most specific
    (country, region, city, address); all others go the other way
    (address, city, region, country). The postal code always comes last.

    Args:
        location: Location mapping
        locale: Locale code
        escape: Escaper for the target engine

    Returns:
        Escaped address line joined by the locale's comma
    """
    country = get_term(locale, "countries", location.get("country"))
    address = location.get("address")
    city = location.get("city")
    region = location.get("region")
    postal_code = location.get("postalCode")

    if is_cjk_locale(locale):
        parts = [country, region, city, address, postal_code]
    else:
        parts = [address, city, region, country, postal_code]

    return join_non_empty([escape(part or "") for part in parts], get_punctuations(locale)["comma"])


def get_icon(network: Optional[str], engine: str) -> str:
    """
    Get the icon prefix for a link.

    Args:
        network: Profile network name; unknown or empty gives a generic link icon
        engine: Engine name

    Returns:
        Icon markup followed by a space ("" for Markdown)
    """
    slug = NETWORK_ICONS.get(network or "")

    if engine == "latex":
        name = "".join(part.capitalize() for part in slug.split("-")) if slug else "Link"
        return f"{{\\small \\fa{name}}}\\ "
    if engine == "html":
        css_class = f"fa-brands fa-{slug}" if slug else "fa-solid fa-link"
        return f'<i class="{css_class}"></i> '
    return ""


def compose_link(url: str, text: str, generator: CodeGenerator, icon: str = "") -> str:
    """
    Build a link in the generator's grammar, optionally prefixed by an icon.

    Args:
        url: Link target (not escaped)
        text: Raw display text
        generator: Code generator for the target engine
        icon: Icon prefix from get_icon()

    Returns:
        Icon plus link markup; just icon plus escaped text if url is empty
    """
    label = generator.escape(text)
    if is_empty_value(url):
        return f"{icon}{label}"
    return icon + generator.apply_mark(label, Mark(type=MarkType.LINK, href=url))


def compose_basics_url(url: str, generator: CodeGenerator, show_icons: bool = True) -> str:
    """Link for the personal website in the header; "" if url is empty."""
    if is_empty_value(url):
        return ""
    icon = show_if(show_icons, get_icon(None, generator.engine))
    return compose_link(url, url, generator, icon)


def compose_profile_url(
    profile: Mapping[str, Any], generator: CodeGenerator, show_icons: bool = True
) -> str:
    """Link showing "@username" for a social profile; "" without a username."""
    username = profile.get("username")
    if is_empty_value(username):
        return ""
    icon = show_if(show_icons, get_icon(profile.get("network"), generator.engine))
    return compose_link(profile.get("url"), f"@{username}", generator, icon)


def join_urls(urls: Iterable[str], engine: str) -> str:
    """Join header links with the engine's separator, skipping empty ones."""
    separators = {
        "latex": LATEX_URLS_SEPARATOR,
        "html": HTML_URLS_SEPARATOR,
        "markdown": MARKDOWN_URLS_SEPARATOR,
    }
    return join_non_empty(urls, separators[engine])


def compose_section_names(
    locale: Optional[str], aliases: Optional[Mapping[str, str]], escape: Escaper
) -> Dict[str, str]:
    """
    Title for every section: the layout's alias if set, else the localized name.

    Args:
        locale: Locale code
        aliases: layout.sections.aliases (section id -> title)
        escape: Escaper for the target engine

    Returns:
        Dict of section id -> escaped title
    """
    aliases = aliases or {}
    return {
        section: escape(aliases.get(section) or get_term(locale, "sections", section))
        for section in SECTION_IDS
    }


def render_summary(stored: Any, generator: CodeGenerator) -> str:
    """
    Generate markup for a stored rich-text summary.

    LaTeX output has its blank lines replaced by "%" lines, since moderncv
    entry arguments cannot contain paragraph breaks. Markdown output keeps at
    most one blank line in a row.

    Args:
        stored: Stored document (JSON string or mapping), or empty
        generator: Code generator for the target engine

    Returns:
        Markup without surrounding whitespace; "" for empty or malformed input
    """
    document = parse_summary(stored)
    if document is None:
        return ""

    markup = generator.generate(document)

    if generator.engine == "latex":
        return replace_blank_lines_with_percent(markup.strip())
    if generator.engine == "markdown":
        return set_max_consecutive_blank_lines(markup).strip()
    return markup.strip()
