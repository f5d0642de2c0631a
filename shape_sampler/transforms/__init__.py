"""Pure shape transforms mapping uniform draws to samples."""
