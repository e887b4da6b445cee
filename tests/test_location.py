"""Tests for notary_ally.location."""

import pytest

from notary_ally.core.exceptions import ConfigurationError, CountyLookupError, GeolocationError
from notary_ally.location import FixedGeolocationProvider, GeolocationProvider, LocationFinder
from notary_ally.services.lookup import COUNTY_FAILED


class DeniedProvider:
    def get_current_position(self, high_accuracy=True):
        raise GeolocationError("User denied Geolocation")


class BrokenProvider:
    def get_current_position(self, high_accuracy=True):
        raise RuntimeError("sensor offline")


class TestFixedProvider:
    def test_position(self):
        provider = FixedGeolocationProvider(30.27, -97.74)
        assert isinstance(provider, GeolocationProvider)
        assert provider.get_current_position() == (30.27, -97.74)

    def test_unavailable(self):
        with pytest.raises(GeolocationError):
            FixedGeolocationProvider(None, -97.74).get_current_position()

    def test_out_of_range(self):
        with pytest.raises(GeolocationError):
            FixedGeolocationProvider(91, 0).get_current_position()


class TestLocationFinder:
    def test_success(self, fake_lookup):
        info = LocationFinder(FixedGeolocationProvider(30.27, -97.74), fake_lookup).find()
        assert info.ok
        assert (info.latitude, info.longitude, info.county) == (30.27, -97.74, "Travis County")

    def test_geolocation_error(self, fake_lookup):
        info = LocationFinder(DeniedProvider(), fake_lookup).find()
        assert info.error == "Geolocation Error: User denied Geolocation"
        assert (info.latitude, info.longitude, info.county) == (0, 0, "")
        assert fake_lookup.calls == []

    def test_lookup_error(self, lookup_factory):
        lookup = lookup_factory(error=CountyLookupError(COUNTY_FAILED))
        info = LocationFinder(FixedGeolocationProvider(1.0, 2.0), lookup).find()
        assert info.error == f"API Error: {COUNTY_FAILED}"
        assert (info.latitude, info.longitude, info.county) == (0, 0, "")

    def test_missing_credential(self, lookup_factory):
        lookup = lookup_factory(error=ConfigurationError("API key not configured."))
        info = LocationFinder(FixedGeolocationProvider(1.0, 2.0), lookup).find()
        assert info.error.startswith("API Error: ")

    @pytest.mark.asyncio
    async def test_afind(self, fake_lookup):
        info = await LocationFinder(FixedGeolocationProvider(30.27, -97.74), fake_lookup).afind()
        assert info.county == "Travis County"

    @pytest.mark.asyncio
    async def test_afind_geolocation_error(self, fake_lookup):
        info = await LocationFinder(DeniedProvider(), fake_lookup).afind()
        assert info.error.startswith("Geolocation Error: ")

    def test_provider_crash_reported(self, fake_lookup):
        info = LocationFinder(BrokenProvider(), fake_lookup).find()
        assert info.error == "Geolocation Error: sensor offline"
        assert (info.latitude, info.longitude, info.county) == (0, 0, "")
        assert fake_lookup.calls == []

    @pytest.mark.asyncio
    async def test_afind_provider_crash_reported(self, fake_lookup):
        info = await LocationFinder(BrokenProvider(), fake_lookup).afind()
        assert info.error == "Geolocation Error: sensor offline"
