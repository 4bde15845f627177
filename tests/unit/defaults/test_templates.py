from pulsar_operator.defaults import (
    default_auth_config,
    default_components,
    default_tls_config,
)
from pulsar_operator.enums import ImagePullPolicy


class TestTemplates:
    def test_components_literals(self) -> None:
        assert default_components().to_document() == {
            "zookeeperBaseName": "zookeeper",
            "bookkeeperBaseName": "bookkeeper",
            "brokerBaseName": "broker",
            "proxyBaseName": "proxy",
            "autorecoveryBaseName": "autorecovery",
            "bastionBaseName": "bastion",
            "functionsWorkerBaseName": "function",
        }

    def test_tls_is_disabled_with_default_secret(self) -> None:
        tls = default_tls_config()

        assert tls.enabled is False
        assert tls.default_secret_name == "pulsar-tls"
        assert tls.broker is None

    def test_auth_template(self) -> None:
        assert default_auth_config().to_document() == {
            "enabled": False,
            "token": {
                "publicKeyFile": "my-public.key",
                "privateKeyFile": "my-private.key",
                "superUserRoles": ["superuser", "admin", "websocket", "proxy"],
                "proxyRoles": ["proxy"],
                "provisioner": {
                    "initialize": True,
                    "image": "datastax/burnell:latest",
                    "imagePullPolicy": "IfNotPresent",
                    "rbac": {"create": True, "namespaced": True},
                },
            },
        }

    def test_each_call_builds_new_objects(self) -> None:
        first = default_auth_config()
        second = default_auth_config()

        assert first.token is not None
        assert second.token is not None
        assert first.token is not second.token
        assert first.token.super_user_roles is not second.token.super_user_roles
        assert first.token.provisioner is not second.token.provisioner

    def test_mutating_a_template_does_not_leak(self) -> None:
        template = default_auth_config()
        assert template.token is not None
        assert template.token.proxy_roles is not None
        template.token.proxy_roles.append("intruder")
        assert template.token.provisioner is not None
        template.token.provisioner.image_pull_policy = ImagePullPolicy.ALWAYS

        fresh = default_auth_config()

        assert fresh.token is not None
        assert fresh.token.proxy_roles == ["proxy"]
        assert fresh.token.provisioner is not None
        assert fresh.token.provisioner.image_pull_policy == ImagePullPolicy.IF_NOT_PRESENT
