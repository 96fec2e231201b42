"""Test factories using factory_boy."""

import factory

from repo_links.core.models import HeadKind, OrgInfo, ProviderConfig, UrlParams
from repo_links.core.models.head import Head


class HeadFactory(factory.Factory):
    """Factory for creating branch heads."""

    class Meta:
        model = Head

    kind = HeadKind.BRANCH
    value = "main"


class UrlParamsFactory(factory.Factory):
    """Factory for creating UrlParams: src/index.ts on main, lines 12-16."""

    class Meta:
        model = UrlParams

    head = factory.SubFactory(HeadFactory)
    selection = (11, 15)
    relative_file_path = "src/index.ts"


class OrgInfoFactory(factory.Factory):
    """Factory for creating OrgInfo instances."""

    class Meta:
        model = OrgInfo

    org = factory.Sequence(lambda n: f"org{n}")
    repo = factory.Faker("slug")
    hostname = "github.com"


class ProviderConfigFactory(factory.Factory):
    """Factory for creating ProviderConfig instances."""

    class Meta:
        model = ProviderConfig

    remote = None
    hostnames = factory.LazyFunction(list)
