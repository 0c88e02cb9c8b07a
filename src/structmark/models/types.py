"""Concrete Schema.org types.

The property name lists are plain data taken from the Schema.org vocabulary;
validation rules read them through ``SchemaEntity.valid_properties()``.
"""

from __future__ import annotations

from typing import ClassVar

from structmark.models.entity import SchemaEntity

# ── Shared vocabulary ───────────────────────────────────
THING_PROPERTIES: tuple[str, ...] = (
    "additionalType", "alternateName", "description", "disambiguatingDescription",
    "identifier", "image", "mainEntityOfPage", "name", "potentialAction", "sameAs",
    "subjectOf", "url", "dateCreated", "dateModified", "datePublished",
)

ARTICLE_PROPERTIES: tuple[str, ...] = (
    "about", "abstract", "accessMode", "accessModeSufficient", "accessibilityAPI",
    "accessibilityControl", "accessibilityFeature", "accessibilityHazard",
    "accessibilitySummary", "accountablePerson", "aggregateRating", "alternativeHeadline",
    "articleBody", "articleSection", "associatedMedia", "audience", "audio", "author",
    "award", "character", "citation", "comment", "commentCount", "conditionsOfAccess",
    "contentLocation", "contentRating", "contentReferenceTime", "contributor",
    "copyrightHolder", "copyrightNotice", "copyrightYear", "correction", "countryOfOrigin",
    "creativeWorkStatus", "creator", "creditText", "discussionUrl", "editEIDR", "editor",
    "educationalAlignment", "educationalLevel", "educationalUse", "encoding",
    "encodingFormat", "exampleOfWork", "expires", "funder", "funding", "genre", "hasPart",
    "headline", "inLanguage", "interactionStatistic", "interactivityType",
    "interpretedAsClaim", "isAccessibleForFree", "isBasedOn", "isFamilyFriendly",
    "isPartOf", "keywords", "learningResourceType", "license", "locationCreated",
    "mainEntity", "maintainer", "material", "materialExtent", "mentions", "offers",
    "pageEnd", "pageStart", "pagination", "pattern", "position", "producer", "provider",
    "publication", "publisher", "publisherImprint", "publishingPrinciples", "recordedAt",
    "releasedEvent", "review", "schemaVersion", "sdDatePublished", "sdLicense",
    "sdPublisher", "size", "sourceOrganization", "spatial", "spatialCoverage", "sponsor",
    "teachingOutcome", "temporal", "temporalCoverage", "text", "thumbnailUrl",
    "timeRequired", "translationOfWork", "translator", "typicalAgeRange", "usageInfo",
    "version", "video", "workExample", "workTranslation", "wordCount",
)

PERSON_PROPERTIES: tuple[str, ...] = (
    "additionalName", "address", "affiliation", "alumniOf", "award", "birthDate",
    "birthPlace", "brand", "children", "colleague", "contactPoint", "deathDate",
    "deathPlace", "duns", "email", "familyName", "faxNumber", "follows", "funder",
    "funding", "gender", "givenName", "globalLocationNumber", "hasCredential",
    "hasOccupation", "hasOfferCatalog", "hasPOS", "height", "homeLocation",
    "honorificPrefix", "honorificSuffix", "interactionStatistic", "jobTitle", "knows",
    "knowsAbout", "knowsLanguage", "makesOffer", "memberOf", "naics", "nationality",
    "netWorth", "owns", "parent", "performerIn", "publishingPrinciples", "relatedTo",
    "seeks", "sibling", "sponsor", "spouse", "taxID", "telephone", "vatID", "weight",
    "workLocation", "worksFor",
)

ORGANIZATION_PROPERTIES: tuple[str, ...] = (
    "actionableFeedbackPolicy", "address", "aggregateRating", "alumni", "areaServed",
    "award", "brand", "contactPoint", "correctionsPolicy", "department",
    "dissolutionDate", "diversityPolicy", "diversityStaffingReport", "duns", "email",
    "employee", "ethicsPolicy", "event", "faxNumber", "founder", "foundingDate",
    "foundingLocation", "funder", "funding", "globalLocationNumber", "hasCredential",
    "hasMerchantReturnPolicy", "hasOfferCatalog", "hasPOS", "interactionStatistic",
    "keywords", "knowsAbout", "knowsLanguage", "legalName", "leiCode", "location", "logo",
    "makesOffer", "member", "memberOf", "naics", "nonprofitStatus", "numberOfEmployees",
    "ownershipFundingInfo", "owns", "parentOrganization", "publishingPrinciples",
    "review", "seeks", "serviceArea", "slogan", "sponsor", "subOrganization", "taxID",
    "telephone", "unnamedSourcesPolicy", "vatID",
)


# ── Types ────────────────────────────────────────────────
class Thing(SchemaEntity):
    """The most generic Schema.org type."""
    schema_type: ClassVar[str] = "Thing"
    optional_properties: ClassVar[tuple[str, ...]] = THING_PROPERTIES


class Article(SchemaEntity):
    """An article, such as a news article or piece of investigative report."""
    schema_type: ClassVar[str] = "Article"
    required_properties: ClassVar[tuple[str, ...]] = ("headline",)
    optional_properties: ClassVar[tuple[str, ...]] = THING_PROPERTIES + ARTICLE_PROPERTIES


class Person(SchemaEntity):
    """A person (alive, dead, undead, or fictional)."""
    schema_type: ClassVar[str] = "Person"
    optional_properties: ClassVar[tuple[str, ...]] = THING_PROPERTIES + PERSON_PROPERTIES


class Organization(SchemaEntity):
    """An organization such as a school, NGO, corporation or club."""
    schema_type: ClassVar[str] = "Organization"
    optional_properties: ClassVar[tuple[str, ...]] = THING_PROPERTIES + ORGANIZATION_PROPERTIES
