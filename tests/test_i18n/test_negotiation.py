"""Tests for Accept-Language negotiation and locale redirects."""

from chefai.i18n.negotiation import locale_redirect, negotiate_locale, parse_accept_language


class TestParseAcceptLanguage:
    def test_none_and_empty(self):
        assert parse_accept_language(None) == []
        assert parse_accept_language("") == []

    def test_orders_by_quality(self):
        header = "en;q=0.5, fr;q=0.9, de"
        assert parse_accept_language(header) == ["de", "fr", "en"]

    def test_ties_keep_header_order(self):
        assert parse_accept_language("it, en, fr") == ["it", "en", "fr"]

    def test_zero_quality_dropped(self):
        assert parse_accept_language("en;q=0, fr") == ["fr"]

    def test_wildcard_dropped(self):
        assert parse_accept_language("*, en;q=0.1") == ["en"]

    def test_malformed_quality_counts_as_one(self):
        assert parse_accept_language("en;q=0.5, fr;q=abc") == ["fr", "en"]

    def test_non_finite_quality_counts_as_one(self):
        assert parse_accept_language("en;q=0.5, fr;q=nan, de;q=0.8") == ["fr", "de", "en"]
        assert parse_accept_language("en;q=0.5, it;q=inf") == ["it", "en"]

    def test_quality_above_one_counts_as_one(self):
        assert parse_accept_language("de, en;q=7") == ["de", "en"]


class TestNegotiateLocale:
    def test_exact_match(self):
        assert negotiate_locale("fr,en;q=0.8") == "fr"

    def test_region_subtag_matches_primary(self):
        assert negotiate_locale("de-AT,en;q=0.5") == "de"

    def test_case_insensitive(self):
        assert negotiate_locale("EN-us") == "en"

    def test_unsupported_skipped(self):
        assert negotiate_locale("pt-BR, it;q=0.4") == "it"

    def test_no_match_uses_default(self):
        assert negotiate_locale("ja, zh;q=0.9") == "es"
        assert negotiate_locale(None) == "es"


class TestLocaleRedirect:
    def test_root_goes_to_landing(self):
        assert locale_redirect("/", "en") == "/en/landing"

    def test_bare_locale_goes_to_landing(self):
        assert locale_redirect("/fr", None) == "/fr/landing"
        assert locale_redirect("/fr/", None) == "/fr/landing"

    def test_unprefixed_path_gets_negotiated_locale(self):
        assert locale_redirect("/login", "de-DE,de;q=0.9") == "/de/login"

    def test_unprefixed_without_header_uses_default(self):
        assert locale_redirect("/community", None) == "/es/community"

    def test_prefixed_path_served(self):
        assert locale_redirect("/en/dashboard", "fr") is None

    def test_ignored_paths(self):
        for path in ("/api/stripe-webhook", "/admin", "/admin/users", "/favicon.ico", "/_event"):
            assert locale_redirect(path, "en") is None, path

    def test_empty_path_treated_as_root(self):
        assert locale_redirect("", "it") == "/it/landing"
