"""Job template users paste into ``.gitlab-ci.yml`` to enable merge attribution."""

GITLAB_CI_TEMPLATE_YAML = """\
authorship-engine:
  stage: .post
  image: python:3.12-slim
  rules:
    - if: $CI_PIPELINE_SOURCE == "push" && $CI_COMMIT_BRANCH == $CI_DEFAULT_BRANCH
  variables:
    GIT_DEPTH: "0"
  before_script:
    - apt-get update && apt-get install -y --no-install-recommends git
    - pip install authorship-engine
  script:
    - authorship-engine ci gitlab run
"""


def render_install_instructions() -> str:
    return "\n".join(
        [
            "Add the following to your .gitlab-ci.yml:",
            "",
            "---",
            GITLAB_CI_TEMPLATE_YAML.rstrip("\n"),
            "---",
        ]
    )
