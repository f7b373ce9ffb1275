"""
Section table: every report section served under /api/impact/{section}.
"""
from typing import Dict

from impact_report.models.section import FieldKind, NestedGroup, SectionSchema

S = FieldKind.STRING
B = FieldKind.BOOLEAN
N = FieldKind.NUMBER
O = FieldKind.OBJECT
OL = FieldKind.OBJECT_LIST
SL = FieldKind.STRING_LIST

# Shared by most sections
VISIBILITY = {"visible": B, "animationsEnabled": B}
BACKGROUND = {"sectionBgColor": S, "sectionBgGradient": S, "sectionBgImage": S}


HERO = SectionSchema(
    name="hero",
    collection="hero",
    label="Hero content",
    field_kinds={
        "backgroundColor": S,
        "backgroundImage": S,
        "backgroundImageGrayscale": B,
        "textAlign": S,
        "layoutVariant": S,
        "ariaLabel": S,
        "titleColor": S,
        "subtitleColor": S,
        "yearColor": S,
        "taglineColor": S,
        "primaryCtaColor": S,
        "secondaryCtaColor": S,
        "title": S,
        "subtitle": S,
        "year": S,
        "tagline": S,
        "bubbles": SL,
        "primaryCta": O,
        "secondaryCta": O,
    },
)

MISSION = SectionSchema(
    name="mission",
    collection="mission",
    label="Mission content",
    field_kinds={
        **VISIBILITY,
        "backgroundColor": S,
        "backgroundImage": S,
        "backgroundImageAlt": S,
        "backgroundImageGrayscale": B,
        "ariaLabel": S,
        "textAlign": S,
        "layoutVariant": S,
        "title": S,
        "titleColor": S,
        "titleGradient": S,
        "titleUnderlineGradient": S,
        "badgeLabel": S,
        "badgeIcon": O,
        "badgeTextColor": S,
        "badgeBgColor": S,
        "badgeBorderColor": S,
        "statementTitle": S,
        "statementTitleColor": S,
        "statementText": S,
        "statementTextColor": S,
        "statementMeta": S,
        "statementMetaColor": S,
        "serial": S,
        "serialColor": S,
        "ticketStripeGradient": S,
        "ticketBorderColor": S,
        "ticketBackdropColor": S,
        "ticketShowBarcode": B,
        "backgroundLogo": O,
        "statsTitle": S,
        "statsTitleColor": S,
        "stats": OL,
        "statsEqualizer": O,
        "modals": OL,
    },
)

DEFAULTS = SectionSchema(
    name="defaults",
    collection="defaults",
    label="Defaults",
    field_kinds={
        "colorSwatch": SL,
        "sectionOrder": SL,
    },
)

FLEX_A = SectionSchema(
    name="flex-a",
    collection="flex_a",
    label="FlexA content",
    field_kinds={
        **VISIBILITY,
        **BACKGROUND,
        "primaryColor": S,
        "textColor": S,
        "labelTextColor": S,
        "headlineColor": S,
        "subtitleColor": S,
        "heroImageBorderRadius": N,
        "heroOverlayColor": S,
        "paragraphs": SL,
        "quoteBgColor": S,
        "quoteTextColor": S,
        "quoteBorderRadius": N,
        "quoteAuthorColor": S,
        "sidebarBgColor": S,
        "sidebarBorderColor": S,
        "sidebarBorderRadius": N,
        "sidebarTitleColor": S,
        "sidebarTitleBorderColor": S,
        "statNumberColor": S,
        "statLabelColor": S,
        "ariaLabel": S,
    },
    nested_groups={
        "header": NestedGroup(
            legacy_fields={
                "label": "headerLabel",
                "title": "headline",
                "titleHighlight": "headlineHighlight",
                "subtitle": "subhead",
            },
        ),
        "heroImage": NestedGroup(
            legacy_fields={"url": "heroImageUrl", "alt": "heroImageAlt"},
        ),
        "quote": NestedGroup(
            legacy_fields={
                "text": "quoteText",
                "author": "quoteAuthor",
                "insertAfterParagraph": "quoteInsertAfterParagraph",
            },
            defaults={"insertAfterParagraph": 1},
            visibility_field="quoteVisible",
        ),
        "sidebar": NestedGroup(
            legacy_fields={"title": "sidebarTitle", "stats": "sidebarStats"},
            defaults={"stats": []},
            visibility_field="sidebarVisible",
        ),
    },
)

FLEX_B = SectionSchema(
    name="flex-b",
    collection="flex_b",
    label="FlexB content",
    field_kinds={
        **VISIBILITY,
        **BACKGROUND,
        "primaryColor": S,
        "textColor": S,
        "labelTextColor": S,
        "headlineColor": S,
        "leadParagraphColor": S,
        "bodyTextColor": S,
        "pullQuoteBgColor": S,
        "pullQuoteTextColor": S,
        "pullQuoteAuthorColor": S,
        "sidebarBgColor": S,
        "sidebarBorderColor": S,
        "sidebarBorderRadius": N,
        "sidebarImageBorderRadius": N,
        "sidebarTitleColor": S,
        "bulletTextColor": S,
        "bulletMarkerColor": S,
        "keyTakeawayBgColor": S,
        "keyTakeawayTextColor": S,
        "keyTakeawayBorderRadius": N,
        "header": O,
        "leadParagraph": S,
        "bodyParagraphs": SL,
        "pullQuote": O,
        "sidebar": O,
        "keyTakeaway": O,
        "ariaLabel": S,
    },
)

FLEX_C = SectionSchema(
    name="flex-c",
    collection="flex_c",
    label="FlexC content",
    field_kinds={
        **VISIBILITY,
        **BACKGROUND,
        "primaryColor": S,
        "titleColor": S,
        "subtitleColor": S,
        "notesTextColor": S,
        "creditRoleColor": S,
        "creditValueColor": S,
        "borderColor": S,
        "header": O,
        "poster": O,
        "directorsNotes": O,
        "credits": OL,
        "ariaLabel": S,
    },
)

FOOTER = SectionSchema(
    name="footer",
    collection="footer",
    label="Footer content",
    field_kinds={
        "visible": B,
        "sectionBgGradient": S,
        "sectionBgColor": S,
        "topBorderGradient": S,
        "logo": O,
        "description": S,
        "descriptionColor": S,
        "socialLinks": OL,
        "socialBubbleBgColor": S,
        "socialBubbleHoverBgColor": S,
        "socialBubbleIconColor": S,
        "socialBubbleBorderColor": S,
        "columns": OL,
        "columnTitleColor": S,
        "columnLinkColor": S,
        "columnLinkHoverColor": S,
        "bottomBar": O,
        "newsletter": O,
        "mailingAddress": O,
    },
)

NATIONAL_IMPACT = SectionSchema(
    name="national-impact",
    collection="national_impact",
    label="National impact content",
    field_kinds={
        **VISIBILITY,
        "title": S,
        "titleColor": S,
        "sectionBgColor": S,
        "overlayButtonBgColor": S,
        "overlayButtonHoverBgColor": S,
        "regions": OL,
    },
)

IMPACT_LEVELS = SectionSchema(
    name="impact-levels",
    collection="impact_levels",
    label="Impact levels content",
    field_kinds={
        **VISIBILITY,
        "sectionBgColor": S,
        "glowColor1": S,
        "glowColor2": S,
        "cardBgColor": S,
        "cardHoverBgColor": S,
        "amountColor": S,
        "descriptionColor": S,
        "header": O,
        "cta": O,
        "soundWave": O,
        "levels": OL,
        "ariaLabel": S,
    },
)

HEAR_OUR_IMPACT = SectionSchema(
    name="hear-our-impact",
    collection="hear_our_impact",
    label="Hear our impact content",
    field_kinds={
        **VISIBILITY,
        **BACKGROUND,
        "title": S,
        "titleColor": S,
        "description": S,
        "descriptionColor": S,
        "embedUrls": SL,
        "ariaLabel": S,
    },
)


POPULATION = SectionSchema(
    name="population",
    collection="population",
    label="Population content",
    field_kinds={
        **VISIBILITY,
        **BACKGROUND,
        "sectionBadge": S,
        "sectionTitle": S,
        "title": S,
        "infoCard1Text": S,
        "infoCard2Text": S,
        "demographicsData": OL,
        "demographicsCaption": S,
        "stat1Percent": N,
        "stat1Text": S,
        "stat1Color": S,
        "stat2Percent": N,
        "stat2Text": S,
        "stat2Color": S,
        "cgasTitle": S,
        "cgasTooltip": S,
        "cgasStats": OL,
        "skillsTitle": S,
        "skillsList": SL,
        "blob1ColorA": S,
        "blob1ColorB": S,
        "blob2ColorA": S,
        "blob2ColorB": S,
    },
)


SECTIONS: Dict[str, SectionSchema] = {
    schema.name: schema
    for schema in (
        HERO,
        MISSION,
        POPULATION,
        DEFAULTS,
        FLEX_A,
        FLEX_B,
        FLEX_C,
        FOOTER,
        NATIONAL_IMPACT,
        IMPACT_LEVELS,
        HEAR_OUR_IMPACT,
    )
}
