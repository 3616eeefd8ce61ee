"""Mutation resolvers for the bariatric domain.

These resolvers execute CQRS commands using Command Handlers:
- savePatientProfile: Create or replace a patient's clinical profile
- logWeight: Record a weight measurement
"""

import strawberry

from application.bariatric.commands.log_weight import LogWeightCommand, LogWeightHandler
from application.bariatric.commands.save_patient_profile import (
    SavePatientProfileCommand,
    SavePatientProfileHandler,
)
from api.resolvers.bariatric.mappers import map_log_weight_result, map_patient_profile
from api.types_bariatric import (
    LogWeightInput,
    LogWeightResultType,
    PatientProfileInput,
    PatientProfileType,
)


@strawberry.type
class BariatricMutations:
    """GraphQL mutations for the bariatric domain."""

    @strawberry.mutation
    async def save_patient_profile(
        self,
        info: strawberry.types.Info,
        input: PatientProfileInput,
    ) -> PatientProfileType:
        """Create or replace a patient profile.

        Raises:
            InvalidArgumentError: If a measurement is not positive or the
                date of birth is after today

        Example:
            mutation {
              bariatric {
                savePatientProfile(input: {
                  userId: "user123"
                  sex: FEMALE
                  heightCm: 165
                  currentWeightKg: 110
                  surgeryDate: "2024-01-15"
                  surgeryType: SLEEVE
                  currentPhase: PUREED
                }) { userId currentPhase }
              }
            }
        """
        repository = info.context.get("profile_repository")
        if not repository:
            raise Exception("Missing profile_repository in GraphQL context")

        command = SavePatientProfileCommand(
            user_id=input.user_id,
            dob=input.dob,
            sex=input.sex.value if input.sex else None,
            height_cm=input.height_cm,
            baseline_weight_kg=input.baseline_weight_kg,
            current_weight_kg=input.current_weight_kg,
            surgery_date=input.surgery_date,
            surgery_type=input.surgery_type.value if input.surgery_type else None,
            current_phase=input.current_phase.value if input.current_phase else None,
        )

        handler = SavePatientProfileHandler(repository=repository)
        profile = await handler.handle(command)
        return map_patient_profile(profile)

    @strawberry.mutation
    async def log_weight(
        self,
        info: strawberry.types.Info,
        input: LogWeightInput,
    ) -> LogWeightResultType:
        """Log a weight measurement.

        The entry gets a BMI when the profile has a height. Entries dated
        today also become the profile's current weight.

        Raises:
            PatientProfileNotFoundError: If the user has no profile
            InvalidArgumentError: If the weight is not positive

        Example:
            mutation {
              bariatric {
                logWeight(input: {userId: "user123", weightKg: 104.2}) {
                  entry { weightKg bmi { bmi category } }
                  profileUpdated
                }
              }
            }
        """
        profile_repository = info.context.get("profile_repository")
        if not profile_repository:
            raise Exception("Missing profile_repository in GraphQL context")
        weight_entry_repository = info.context.get("weight_entry_repository")
        if not weight_entry_repository:
            raise Exception("Missing weight_entry_repository in GraphQL context")

        command = LogWeightCommand(
            user_id=input.user_id,
            weight_kg=input.weight_kg,
            measured_at=input.measured_at,
            notes=input.notes,
        )

        handler = LogWeightHandler(
            profile_repository=profile_repository,
            weight_entry_repository=weight_entry_repository,
        )
        result = await handler.handle(command)
        return map_log_weight_result(result)
