"""scikit-learn estimator interface for the nominal classifiers."""

from __future__ import annotations

from dataclasses import fields
from typing import Any

import numpy as np
import pandas as pd
from sklearn.base import BaseEstimator, ClassifierMixin
from sklearn.utils.validation import check_is_fitted

from ..configs.model import CONFIG_CLASSES
from ..data.dataset import NominalDataset
from ..exceptions import DataError
from ..utils.functions.probability import EPSILON
from .base import NominalClassifier
from .factory import create_model

__all__ = ["NominalEstimator"]

CLASS_COLUMN = "class"


class NominalEstimator(ClassifierMixin, BaseEstimator):
    """
    Wrap a registered nominal classifier as a scikit-learn classifier.

    `X` holds one label per attribute and `y` one class label per row. Labels are
    compared as strings; `classes_` keeps the original `y` values, so `predict`
    returns labels of the same type as the training targets.

    Args:
        model (str, optional): Registered classifier name. Defaults to "NaiveBayes".
        k (int, optional): Neighbor count, used by "KNN". Defaults to 3.
        epsilon (float, optional): Gain threshold, used by "ID3". Defaults to 1e-6.
    """

    def __init__(self, model: str = "NaiveBayes", k: int = 3, epsilon: float = EPSILON) -> None:
        self.model = model
        self.k = k
        self.epsilon = epsilon

    def _make_classifier(self) -> NominalClassifier:
        if self.model not in CONFIG_CLASSES:
            return create_model({"name": self.model})
        params = {"name": self.model, "k": self.k, "epsilon": self.epsilon}
        names = {f.name for f in fields(CONFIG_CLASSES[self.model])}
        return create_model({k: v for k, v in params.items() if k in names})

    def fit(self, X: Any, y: Any) -> NominalEstimator:  # noqa: N803
        """Encode the labels and train the wrapped classifier."""
        X_df = self._frame(X)
        y_arr = np.asarray(y)
        if y_arr.ndim != 1 or len(y_arr) != len(X_df):
            raise DataError(f"y must be 1-D with {len(X_df)} labels, got shape {y_arr.shape}.")

        self.classes_ = np.unique(y_arr)
        df = X_df.assign(**{CLASS_COLUMN: y_arr.astype(str)})
        self.dataset_ = NominalDataset.from_dataframe(
            df,
            class_column=CLASS_COLUMN,
            attribute_values={CLASS_COLUMN: [str(c) for c in self.classes_]},
            name="estimator",
        )
        self.classifier_ = self._make_classifier()
        self.classifier_.train(self.dataset_)
        self.n_features_in_ = X_df.shape[1]
        return self

    def predict_proba(self, X: Any) -> np.ndarray:  # noqa: N803
        """Class distributions, columns ordered as `classes_`."""
        check_is_fitted(self, "classifier_")
        X_df = self._frame(X)
        if X_df.shape[1] != self.n_features_in_:
            raise DataError(f"X has {X_df.shape[1]} features, expected {self.n_features_in_}.")
        rows = [self.dataset_.make_row(labels) for labels in X_df.itertuples(index=False)]
        if not rows:
            return np.empty((0, len(self.classes_)))
        return np.vstack([self.classifier_.predict(row) for row in rows])

    def predict(self, X: Any) -> np.ndarray:  # noqa: N803
        """Most probable class label per row."""
        probs = self.predict_proba(X)
        return self.classes_[np.argmax(probs, axis=1)]

    @staticmethod
    def _frame(X: Any) -> pd.DataFrame:  # noqa: N803
        if isinstance(X, pd.DataFrame):
            df = X.astype(str)
        else:
            values = np.asarray(X, dtype=object)
            if values.ndim != 2:
                raise DataError(f"X must be 2-D, got {values.ndim} dimension(s).")
            df = pd.DataFrame(values).astype(str)
        df.columns = [f"x{i}" for i in range(df.shape[1])]
        return df
