from code_scanning_report.domain.models import (
    CodeScanningAlert,
    DetailLevel,
    FullAlert,
    MediumAlert,
    MinimumAlert,
    ProjectedAlert,
)


def project_alert(
    alert: CodeScanningAlert, level: DetailLevel
) -> ProjectedAlert | CodeScanningAlert:
    """Flatten an alert into the shape for ``level``.

    RAW returns the alert object itself. FULL attaches ``help_text`` only
    when the alert carries non-empty help.
    """
    if level == DetailLevel.RAW:
        return alert

    instance = alert.most_recent_instance
    location = instance.location
    essentials = dict(
        number=alert.number,
        rule_id=alert.rule.id,
        rule_name=alert.rule.name,
        severity=alert.rule.severity,
        message=instance.message_text,
        file_path=location.path,
        start_line=location.start_line,
        end_line=location.end_line,
        commit_sha=instance.commit_sha,
    )

    if level == DetailLevel.MINIMUM:
        return MinimumAlert(**essentials)

    context = dict(
        rule_description=alert.rule.description,
        start_column=location.start_column,
        end_column=location.end_column,
        state=instance.state,
    )

    if level == DetailLevel.MEDIUM:
        return MediumAlert(**essentials, **context)

    return FullAlert(
        **essentials,
        **context,
        ref=instance.ref,
        analysis_key=instance.analysis_key,
        category=instance.category,
        tool_name=alert.tool.name,
        tool_version=alert.tool.version,
        help_text=alert.help or None,
    )
