import pytest

from schema_registry_codegen.pipeline.analyzer import DependencyClassifier, DependencyDomain
from schema_registry_codegen.pipeline.backends import create_backend
from schema_registry_codegen.pipeline.config import GeneratorConfig

OBJECT_META = "io.k8s.apimachinery.pkg.apis.meta.v1.ObjectMeta"
POD_SPEC = "io.k8s.api.core.v1.PodSpec"

OBJECT_META_NAME = "IoK8sApimachineryPkgApisMetaV1ObjectMeta"
POD_SPEC_NAME = "IoK8sApiCoreV1PodSpec"


def _classifier(**config_kwargs):
    config = GeneratorConfig(**config_kwargs)
    return DependencyClassifier(config, create_backend(config))


class TestTypeScriptClassification:
    """Test classification with TypeScript module paths"""

    def test_local_by_default(self):
        dep = _classifier().classify("a.C")

        assert dep.domain is DependencyDomain.LOCAL
        assert dep.alias == "AC"
        assert dep.import_path == "./AC"
        assert not dep.is_external

    def test_kubernetes_ids_local_when_domains_disabled(self):
        classifier = _classifier()

        assert classifier.classify(OBJECT_META).import_path == f"./{OBJECT_META_NAME}"
        assert classifier.classify(POD_SPEC).import_path == f"./{POD_SPEC_NAME}"

    def test_apimachinery_domain(self):
        dep = _classifier(external_apimachinery=True).classify(OBJECT_META)

        assert dep.domain is DependencyDomain.APIMACHINERY
        assert dep.alias == OBJECT_META_NAME
        assert dep.import_path == f"@kubernetes-models/apimachinery/_schemas/{OBJECT_META_NAME}"
        assert dep.is_external

    def test_kubernetes_models_domain(self):
        dep = _classifier(external_kubernetes_models=True).classify(POD_SPEC)

        assert dep.domain is DependencyDomain.KUBERNETES_MODELS
        assert dep.import_path == f"kubernetes-models/_schemas/{POD_SPEC_NAME}"

    def test_apimachinery_checked_first(self):
        classifier = _classifier(external_apimachinery=True, external_kubernetes_models=True)

        assert classifier.classify(OBJECT_META).domain is DependencyDomain.APIMACHINERY
        assert classifier.classify(POD_SPEC).domain is DependencyDomain.KUBERNETES_MODELS

    def test_apimachinery_id_falls_back_to_kubernetes_models(self):
        dep = _classifier(external_kubernetes_models=True).classify(OBJECT_META)

        assert dep.domain is DependencyDomain.KUBERNETES_MODELS
        assert dep.import_path == f"kubernetes-models/_schemas/{OBJECT_META_NAME}"

    def test_non_kubernetes_id_stays_local(self):
        classifier = _classifier(external_apimachinery=True, external_kubernetes_models=True)

        assert classifier.classify("com.example.v1.Widget").domain is DependencyDomain.LOCAL

    def test_custom_package_root(self):
        dep = _classifier(external_apimachinery=True, apimachinery_package="@acme/apimachinery").classify(OBJECT_META)

        assert dep.import_path == f"@acme/apimachinery/_schemas/{OBJECT_META_NAME}"

    def test_short_class_names(self):
        classifier = _classifier(external_apimachinery=True, qualified_class_names=False)

        local = classifier.classify("a.C")
        external = classifier.classify(OBJECT_META)

        assert local.alias == "C"
        assert local.import_path == "./C"
        assert external.alias == "ObjectMeta"
        assert external.import_path == "@kubernetes-models/apimachinery/_schemas/ObjectMeta"


class TestPythonClassification:
    """Test classification with Python module paths"""

    def test_local(self):
        assert _classifier(language="python").classify("a.C").import_path == ".AC"

    def test_external(self):
        classifier = _classifier(language="python", external_apimachinery=True, external_kubernetes_models=True)

        assert classifier.classify(OBJECT_META).import_path == f"kubernetes_models.apimachinery._schemas.{OBJECT_META_NAME}"
        assert classifier.classify(POD_SPEC).import_path == f"kubernetes_models._schemas.{POD_SPEC_NAME}"


def test_local_domain_has_no_package():
    with pytest.raises(ValueError):
        _classifier().package_for(DependencyDomain.LOCAL)
