"""
Step definitions for SOA Slave Sync scenarios.
"""

from unittest.mock import Mock

from behave import given, then, when

from soa_slave_sync.core.events import SOA_DELETE, SOA_INSERT, SOA_UPDATE, EventDispatcher
from soa_slave_sync.core.models import ZoneChangeEvent, ZoneSnapshot
from soa_slave_sync.core.plugin import SlaveZonePlugin
from soa_slave_sync.core.reconciler import SOAReconciler
from soa_slave_sync.providers.mock_provider import MockSlaveZoneProvider
from soa_slave_sync.utils.config import SyncConfig


def _zone(origin, nameserver="ns1.example.com", active=True):
    return ZoneSnapshot(id="1", origin=origin, nameserver=nameserver, active=active)


def _dispatch(context, event_name, event):
    context.reports.extend(context.dispatcher.dispatch(event_name, event))


@given("the slave zone plugin is loaded with the mock provider")
def step_impl(context):
    """Wire the plugin to an in-memory provider and a stub resolver."""
    config = SyncConfig(enabled=True, provider="mock", api_key="behave")
    context.provider = MockSlaveZoneProvider()
    resolver = Mock()
    resolver.lookup.side_effect = lambda ns: context.addresses.get(ns)

    reconciler = SOAReconciler(config, resolver, lambda config, key: context.provider)
    context.dispatcher = EventDispatcher()
    SlaveZonePlugin(config, reconciler).on_load(context.dispatcher)


@given('nameserver "{nameserver}" resolves to "{address}"')
def step_impl(context, nameserver, address):
    context.addresses[nameserver] = address


@given('the provider has a slave zone "{domain}" with master "{address}"')
def step_impl(context, domain, address):
    context.provider.create_domain(domain, "slave", [address])


@given("the provider's next domain listing fails")
def step_impl(context):
    context.provider.fail_next("list_domains", "500", "Internal Server Error")


@when('the SOA "{origin}" with nameserver "{nameserver}" is inserted')
def step_impl(context, origin, nameserver):
    _dispatch(context, SOA_INSERT, ZoneChangeEvent(current=_zone(origin, nameserver)))


@when('the SOA "{origin}" changes nameserver from "{old_ns}" to "{new_ns}"')
def step_impl(context, origin, old_ns, new_ns):
    event = ZoneChangeEvent(previous=_zone(origin, old_ns), current=_zone(origin, new_ns))
    _dispatch(context, SOA_UPDATE, event)


@when('the SOA "{origin}" is deactivated')
def step_impl(context, origin):
    event = ZoneChangeEvent(previous=_zone(origin), current=_zone(origin, active=False))
    _dispatch(context, SOA_UPDATE, event)


@when('the SOA "{old_origin}" is renamed to "{new_origin}"')
def step_impl(context, old_origin, new_origin):
    event = ZoneChangeEvent(previous=_zone(old_origin), current=_zone(new_origin))
    _dispatch(context, SOA_UPDATE, event)


@when('the SOA "{origin}" is deleted')
def step_impl(context, origin):
    _dispatch(context, SOA_DELETE, ZoneChangeEvent(previous=_zone(origin)))


@then('the provider has a slave zone "{domain}" with master "{address}"')
def step_impl(context, domain, address):
    matches = [d for d in context.provider.domains if d.domain_name == domain]
    assert matches, f"No slave zone {domain} in {context.provider.domains}"
    assert matches[0].master_ips == [address], f"Unexpected masters {matches[0].master_ips}"
    assert matches[0].type == "slave"


@then("the provider has {count:d} slave zone")
@then("the provider has {count:d} slave zones")
def step_impl(context, count):
    actual = len(context.provider.domains)
    assert actual == count, f"Expected {count} slave zones, found {actual}"


@then("the sync reports a failure")
def step_impl(context):
    assert context.reports, "No event was handled"
    assert not all(report.success for report in context.reports), "Expected a failed sync"
