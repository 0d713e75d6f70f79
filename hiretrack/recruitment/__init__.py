"""@hiretrack_docs"""

"""

Following are the steps an application takes through the hiring pipeline

1. Candidate applies to a published job of a company (`submit_application`). Application is
   created with `applied` status and `applied_at` stamped. A candidate can apply to a job only
   once.

2. Recruiters move the application through screening and interview stages
   (`ApplicationPipeline.advance_to`). Stages are not strictly ordered, an application can be
   moved back to screening from any interview stage. Every move stamps `stage_changed_at` and
   `stage_changed_by` and appends the given note to the application notes.

3. Interviews are scheduled for the application (`schedule_interview`). Interviewer and the
   person scheduling must belong to the company of the application. Onsite interviews need a
   location, video interviews need a video link.

4. Interviews are confirmed, rescheduled, cancelled, completed or marked as no show through
   `InterviewScheduler`. Completing or marking no show is only possible once the interview time
   has passed. These operations return False instead of raising when not allowed.

5. Offer is extended with an optional salary (`extend_offer`) and candidate accepts it
   (`accept_offer`). Application can be rejected (`reject`) or withdrawn (`withdraw`) from any
   open stage. Accepted, rejected and withdrawn applications are closed and cannot be moved.

6. `AnalyticsAggregator` computes rates and breakdowns of a company from persisted applications
   and interviews, `PipelineReport` exports them to an excel workbook.

"""
