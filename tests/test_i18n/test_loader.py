"""Tests for dictionary loading and the per-render locale context."""

import asyncio

import pytest

from chefai.i18n import Locale
from chefai.i18n.composer import LocaleRender, RenderStage, compose_locale_context
from chefai.i18n.loader import LOADERS, DictionaryLoadError, load_dictionary


def _loader(data):
    async def load():
        return dict(data)

    return load


def _failing(exc):
    async def load():
        raise exc

    return load


class TestBuiltinLoaders:
    def test_loader_for_every_locale(self):
        assert set(LOADERS) == {locale.value for locale in Locale}

    @pytest.mark.asyncio
    async def test_loads_json_dictionary(self):
        data = await load_dictionary("en")
        assert data["app.name"] == "ChefAI"
        assert data["nav.dashboard"] == "Dashboard"

    @pytest.mark.asyncio
    async def test_unknown_locale_falls_back_to_default(self):
        data = await load_dictionary("pt")
        es = await load_dictionary("es")
        assert data == es


class TestLoadDictionaryFallback:
    @pytest.mark.asyncio
    async def test_requested_locale_loaded(self):
        loaders = {"es": _loader({"k": "hola"}), "en": _loader({"k": "hello"})}
        assert await load_dictionary("en", loaders, default="es") == {"k": "hello"}

    @pytest.mark.asyncio
    async def test_failed_locale_falls_back_once(self):
        loaders = {"es": _loader({"k": "hola"}), "en": _failing(OSError("gone"))}
        assert await load_dictionary("en", loaders, default="es") == {"k": "hola"}

    @pytest.mark.asyncio
    async def test_invalid_json_falls_back(self):
        loaders = {"es": _loader({"k": "hola"}), "en": _failing(ValueError("bad json"))}
        assert await load_dictionary("en", loaders, default="es") == {"k": "hola"}

    @pytest.mark.asyncio
    async def test_any_loader_error_falls_back(self):
        loaders = {"es": _loader({"k": "hola"}), "en": _failing(RuntimeError("fetch failed"))}
        assert await load_dictionary("en", loaders, default="es") == {"k": "hola"}

    @pytest.mark.asyncio
    async def test_default_error_wrapped(self):
        loaders = {"es": _failing(KeyError("es")), "en": _failing(RuntimeError("fetch failed"))}
        with pytest.raises(DictionaryLoadError) as info:
            await load_dictionary("en", loaders, default="es")
        assert isinstance(info.value.__cause__, KeyError)

    @pytest.mark.asyncio
    async def test_requested_default_error_wrapped(self):
        with pytest.raises(DictionaryLoadError):
            await load_dictionary("es", {"es": _failing(KeyError("es"))}, default="es")

    @pytest.mark.asyncio
    async def test_default_failure_raises(self):
        loaders = {"es": _failing(OSError("gone")), "en": _failing(OSError("gone"))}
        with pytest.raises(DictionaryLoadError):
            await load_dictionary("en", loaders, default="es")

    @pytest.mark.asyncio
    async def test_requesting_failed_default_raises(self):
        loaders = {"es": _failing(OSError("gone"))}
        with pytest.raises(DictionaryLoadError):
            await load_dictionary("es", loaders, default="es")

    @pytest.mark.asyncio
    async def test_missing_default_loader_raises(self):
        with pytest.raises(DictionaryLoadError):
            await load_dictionary("fr", {"en": _loader({})}, default="es")


class TestComposeLocaleContext:
    @pytest.mark.asyncio
    async def test_context_for_path(self):
        ctx = await compose_locale_context("/fr/community")
        assert ctx.locale == "fr"
        assert ctx.display_name == "Français"
        assert ctx.ai_language == "French"
        assert ctx.t("nav.community") == "Communauté"
        assert ctx.t("missing.key") is None

    @pytest.mark.asyncio
    async def test_unprefixed_path_uses_default(self):
        ctx = await compose_locale_context("/dashboard")
        assert ctx.locale == "es"

    @pytest.mark.asyncio
    async def test_dictionary_read_only(self):
        ctx = await compose_locale_context("/en")
        with pytest.raises(TypeError):
            ctx.dictionary["app.name"] = "x"

    @pytest.mark.asyncio
    async def test_stages(self):
        render = LocaleRender("/it/planner", loaders={"es": _loader({}), "it": _loader({})})
        assert render.stage == RenderStage.PATH_RECEIVED
        await render.run()
        assert render.stage == RenderStage.DICTIONARY_LOADED
        assert render.locale == "it"

    @pytest.mark.asyncio
    async def test_render_runs_once(self):
        render = LocaleRender("/en", loaders={"es": _loader({}), "en": _loader({})})
        await render.run()
        with pytest.raises(RuntimeError, match="already ran"):
            await render.run()

    @pytest.mark.asyncio
    async def test_failed_stage(self):
        render = LocaleRender("/en", loaders={"es": _failing(OSError("x"))})
        with pytest.raises(DictionaryLoadError):
            await render.run()
        assert render.stage == RenderStage.FAILED

    @pytest.mark.asyncio
    async def test_failed_stage_for_any_loader_error(self):
        render = LocaleRender("/es", loaders={"es": _failing(KeyError("es"))})
        with pytest.raises(DictionaryLoadError):
            await render.run()
        assert render.stage == RenderStage.FAILED
        assert render.locale == "es"


class TestLocalePipeline:
    @pytest.mark.asyncio
    async def test_unsupported_prefix_gets_default_dictionary(self):
        ctx = await compose_locale_context("/xx/dashboard")
        assert ctx.locale == "es"
        assert dict(ctx.dictionary) == await load_dictionary("es")
        assert ctx.t("nav.dashboard") == "Panel"

    @pytest.mark.asyncio
    async def test_root_loads_default_once(self):
        calls = []

        async def load_es():
            calls.append("es")
            return {"k": "hola"}

        ctx = await compose_locale_context("/", loaders={"es": load_es, "en": _loader({})})
        assert ctx.locale == "es"
        assert ctx.t("k") == "hola"
        assert calls == ["es"]

    @pytest.mark.asyncio
    async def test_concurrent_renders_keep_their_own_context(self):
        def slow(data, delay):
            async def load():
                await asyncio.sleep(delay)
                return dict(data)

            return load

        loaders = {
            "es": slow({"k": "hola"}, 0),
            "en": slow({"k": "hello"}, 0.02),
            "fr": slow({"k": "bonjour"}, 0),
        }
        en, fr = await asyncio.gather(
            compose_locale_context("/en/community", loaders=loaders),
            compose_locale_context("/fr/planner", loaders=loaders),
        )
        assert (en.locale, en.t("k")) == ("en", "hello")
        assert (fr.locale, fr.t("k")) == ("fr", "bonjour")
