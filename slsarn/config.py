from dataclasses import dataclass, replace

from slsarn.constants import (
    DEFAULT_IAM_PARTITION,
    DEFAULT_IAM_REGION,
    DEFAULT_ROLE_ADMIN_NAME,
    DEFAULT_ROLE_CI_NAME,
    DEFAULT_ROLE_DEVELOPER_NAME,
    DEFAULT_STAGE,
    SLS_SERVICE_PREFIX,
    TF_SERVICE_PREFIX,
)
from slsarn.exceptions import MissingRequiredFieldError


@dataclass(frozen=True, kw_only=True)
class ServiceConfig:
    """Naming configuration for a serverless service and its IAM scoping.

    Every string field left empty falls back to its default when the config is
    resolved. Account id and region have no static default: they come from
    whoever calls `resolve()`, usually after an STS / region lookup.

    ## Defaults

    - `iam_partition`: `"*"`
    - `iam_region`: `"*"`
    - `stage`: `"development"`
    - `tf_service_name`: `"tf-" + service_name`
    - `sls_service_name`: `"sls-" + service_name`
    - `role_admin_name` / `role_developer_name` / `role_ci_name`:
      `"admin"` / `"developer"` / `"ci"`

    ## Examples

    ```python
    config = ServiceConfig(service_name="orders", stage="production")
    resolved = config.resolve(account_id="123456789012", region="us-east-1")
    resolved.sls_service_name  # "sls-orders"
    ```

    `iam_region` and `iam_partition` are meant for wildcarding. Keep them as `"*"`
    unless permissions should be pinned to a single region or partition.
    """

    service_name: str = ""
    stage: str = DEFAULT_STAGE
    region: str = ""
    iam_account_id: str = ""
    iam_partition: str = DEFAULT_IAM_PARTITION
    iam_region: str = DEFAULT_IAM_REGION
    tf_service_name: str = ""
    sls_service_name: str = ""
    role_admin_name: str = DEFAULT_ROLE_ADMIN_NAME
    role_developer_name: str = DEFAULT_ROLE_DEVELOPER_NAME
    role_ci_name: str = DEFAULT_ROLE_CI_NAME
    many_lambdas_enabled: bool = False

    def resolve(self, *, account_id: str = "", region: str = "") -> "ServiceConfig":
        """Return a copy with every empty field replaced by its default.

        Args:
            account_id: Already resolved account id, used when `iam_account_id` is empty.
            region: Already resolved deployment region, used when `region` is empty.

        Raises:
            MissingRequiredFieldError: If `service_name` is empty.
        """
        if not self.service_name or not self.service_name.strip():
            raise MissingRequiredFieldError("service_name")

        return replace(
            self,
            stage=self.stage or DEFAULT_STAGE,
            region=self.region or region,
            iam_account_id=self.iam_account_id or account_id,
            iam_partition=self.iam_partition or DEFAULT_IAM_PARTITION,
            iam_region=self.iam_region or DEFAULT_IAM_REGION,
            tf_service_name=self.tf_service_name or f"{TF_SERVICE_PREFIX}{self.service_name}",
            sls_service_name=self.sls_service_name or f"{SLS_SERVICE_PREFIX}{self.service_name}",
            role_admin_name=self.role_admin_name or DEFAULT_ROLE_ADMIN_NAME,
            role_developer_name=self.role_developer_name or DEFAULT_ROLE_DEVELOPER_NAME,
            role_ci_name=self.role_ci_name or DEFAULT_ROLE_CI_NAME,
        )

    @property
    def tags(self) -> dict[str, str]:
        resolved = self.resolve()
        return {"Service": resolved.service_name, "Stage": resolved.stage}

    @property
    def role_group_names(self) -> dict[str, str]:
        """IAM group names for the admin, developer and ci roles.

        Returns:
            Mapping of role kind to "{tf_service_name}-{stage}-{role_name}".
        """
        resolved = self.resolve()
        base = f"{resolved.tf_service_name}-{resolved.stage}-"
        return {
            "admin": f"{base}{resolved.role_admin_name}",
            "developer": f"{base}{resolved.role_developer_name}",
            "ci": f"{base}{resolved.role_ci_name}",
        }
