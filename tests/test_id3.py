import numpy as np
import pytest

from nominal_ml.data import NominalAttribute, Row
from nominal_ml.exceptions import ConfigurationError, DataError, NotFittedError, UnseenValueError
from nominal_ml.models.trees import ID3Classifier, Internal, Leaf


def test_single_class_yields_single_leaf(single_class):
    """A class-pure training set gives a single leaf."""
    tree = ID3Classifier().train(single_class)
    assert isinstance(tree.root, Leaf)
    assert tree.num_nodes == 1
    np.testing.assert_allclose(tree.root.distribution, [0.8, 0.2])


def test_weather_tree_structure(weather):
    """The weather tree splits on outlook, then humidity and windy."""
    tree = ID3Classifier().train(weather)

    root = tree.root
    assert isinstance(root, Internal)
    assert root.attribute_name == "outlook"
    assert len(root.children) == 3

    sunny, overcast, rainy = root.children
    assert isinstance(sunny, Internal) and sunny.attribute_name == "humidity"
    assert isinstance(overcast, Leaf)
    assert isinstance(rainy, Internal) and rainy.attribute_name == "windy"

    assert tree.num_nodes == 8
    assert tree.num_leaves == 5
    assert tree.depth == 2


def test_weather_leaf_distributions(weather):
    """Leaves hold add-one smoothed class distributions."""
    clf = ID3Classifier()
    clf.train(weather)

    overcast = weather.make_row({"outlook": "overcast", "temperature": "hot", "humidity": "high", "windy": "TRUE"})
    np.testing.assert_allclose(clf.predict(overcast), [5 / 6, 1 / 6])

    sunny_high = weather.make_row(["sunny", "cool", "high", "FALSE"])
    np.testing.assert_allclose(clf.predict(sunny_high), [1 / 5, 4 / 5])

    rainy_windy = weather.make_row(["rainy", "mild", "normal", "TRUE"])
    np.testing.assert_allclose(clf.predict(rainy_windy), [1 / 4, 3 / 4])
    assert clf.predict_class(rainy_windy) == 1


def test_training_rows_are_classified_correctly(weather):
    """The weather tree classifies its training rows correctly."""
    clf = ID3Classifier()
    clf.train(weather)
    probs = clf.predict_dataset(weather)
    assert probs.shape == (14, 2)
    np.testing.assert_allclose(probs.sum(axis=1), 1.0, atol=1e-9)
    assert (probs > 0).all()
    predicted = probs.argmax(axis=1)
    actual = [row.class_value for row in weather]
    assert predicted.tolist() == actual


def test_empty_partition_gets_uniform_leaf(make_dataset):
    """A value with no training rows gets a uniform leaf."""
    attributes = [
        NominalAttribute("color", ("red", "green", "blue")),
        NominalAttribute("class", ("yes", "no")),
    ]
    dataset = make_dataset(attributes, [("red", "yes"), ("red", "yes"), ("green", "no")])
    tree = ID3Classifier().train(dataset)

    assert isinstance(tree.root, Internal)
    assert len(tree.root.children) == 3
    blue = tree.root.children[2]
    assert isinstance(blue, Leaf)
    assert blue.num_instances == 0
    np.testing.assert_allclose(blue.distribution, [0.5, 0.5])


def test_identifier_attribute_is_root_and_leaves_stay_smoothed(id_coded):
    """An identifier attribute becomes the root and its leaves stay smoothed."""
    clf = ID3Classifier()
    tree = clf.train(id_coded)
    assert isinstance(tree.root, Internal)
    assert tree.root.attribute_name == "id"

    for row in id_coded:
        probs = clf.predict(row)
        assert (probs > 0).all()
        assert probs[row.class_value] == pytest.approx(2 / 3)


def test_first_attribute_wins_gain_ties(make_dataset):
    """Equal gains keep the first attribute."""
    attributes = [
        NominalAttribute("first", ("x", "y")),
        NominalAttribute("second", ("x", "y")),
        NominalAttribute("class", ("c0", "c1")),
    ]
    rows = [("x", "x", "c0"), ("y", "y", "c1"), ("x", "x", "c0"), ("y", "y", "c1")]
    tree = ID3Classifier().train(make_dataset(attributes, rows))
    assert tree.root.attribute_index == 0


def test_xor_has_no_single_attribute_gain(xor):
    """Neither attribute alone reduces entropy, so ID3 stops at the root."""
    tree = ID3Classifier().train(xor)
    assert isinstance(tree.root, Leaf)
    np.testing.assert_allclose(tree.root.distribution, [0.5, 0.5])


def test_empty_dataset_predicts_uniform(empty):
    """An empty training set predicts the uniform distribution."""
    clf = ID3Classifier()
    clf.train(empty)
    row = Row((0, 1, -1), class_index=-1)
    np.testing.assert_allclose(clf.predict(row), [0.5, 0.5])


def test_unseen_value_raises(weather):
    """A value with no child raises UnseenValueError."""
    clf = ID3Classifier()
    clf.train(weather)
    with pytest.raises(UnseenValueError) as exc_info:
        clf.predict(Row((3, 0, 0, 0, -1), class_index=-1))
    assert exc_info.value.attribute == "outlook"
    assert exc_info.value.num_values == 3


def test_row_length_mismatch_raises(weather):
    """Rows of the wrong width raise DataError."""
    clf = ID3Classifier()
    clf.train(weather)
    with pytest.raises(DataError):
        clf.predict(Row((0, 0, -1), class_index=-1))


def test_predict_before_train_raises():
    """Predicting before training raises NotFittedError."""
    with pytest.raises(NotFittedError):
        ID3Classifier().predict(Row((0, 0), class_index=-1))


def test_invalid_epsilon():
    """A non-positive epsilon is rejected."""
    with pytest.raises(ConfigurationError):
        ID3Classifier(epsilon=0.0)


def test_predict_is_idempotent(weather):
    """Repeated predictions on the same row are identical."""
    clf = ID3Classifier()
    clf.train(weather)
    row = weather.row(0)
    first = clf.predict(row)
    first[:] = 0.0
    second = clf.predict(row)
    third = clf.predict(row)
    np.testing.assert_array_equal(second, third)
    np.testing.assert_allclose(second, [1 / 5, 4 / 5])


def test_retraining_replaces_tree(weather, single_class):
    """Retraining builds a new tree and leaves the old one usable."""
    clf = ID3Classifier()
    first = clf.train(weather)
    second = clf.train(single_class)
    assert clf.model is second
    assert first is not second
    assert isinstance(first.root, Internal)
    np.testing.assert_allclose(first.distribution(weather.row(2)), [5 / 6, 1 / 6])


def test_describe(weather):
    """The text rendering lists one line per branch."""
    tree = ID3Classifier().train(weather)
    assert tree.describe(weather).splitlines() == [
        "outlook = sunny",
        "|  humidity = high: no [0.2000, 0.8000]",
        "|  humidity = normal: yes [0.7500, 0.2500]",
        "outlook = overcast: yes [0.8333, 0.1667]",
        "outlook = rainy",
        "|  windy = FALSE: yes [0.8000, 0.2000]",
        "|  windy = TRUE: no [0.2500, 0.7500]",
    ]
    assert tree.describe().splitlines()[1] == "|  humidity = 0: 1 [0.2000, 0.8000]"


def test_malformed_training_data_is_surfaced(weather_attributes):
    """An out-of-range class value fails training."""
    from nominal_ml.data import NominalDataset

    dataset = NominalDataset(weather_attributes, [(0, 0, 0, 0, 7)])
    with pytest.raises(DataError):
        ID3Classifier().train(dataset)
