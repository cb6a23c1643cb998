"""Tests for the job tree: leaves, composites and the Job wrapper."""

import pytest

from jobtree.model import Job, JobImpl, JobStatus, MultipleJob, SingleJob, walk_jobs


class TestSingleJob:
    def test_starts_pending(self):
        assert SingleJob(1).status() is JobStatus.PENDING

    def test_run_then_stop(self):
        """Status follows run() and stop() exactly."""
        leaf = SingleJob(1)

        assert leaf.run() == "Running single job 1"
        assert leaf.status() is JobStatus.RUNNING

        assert leaf.stop() == "Stopping single job 1"
        assert leaf.status() is JobStatus.STOPPED

    def test_run_is_repeatable(self):
        leaf = SingleJob(7)
        leaf.run()
        assert leaf.run() == "Running single job 7"
        assert leaf.status() is JobStatus.RUNNING

    def test_run_after_stop(self):
        leaf = SingleJob(3)
        leaf.stop()
        leaf.run()
        assert leaf.status() is JobStatus.RUNNING

    def test_satisfies_protocol(self):
        assert isinstance(SingleJob(1), JobImpl)


class TestMultipleJob:
    def test_run_joins_children_in_order(self):
        a, b = SingleJob(10), SingleJob(11)
        composite = MultipleJob([a, b])

        assert composite.status() is JobStatus.PENDING
        assert composite.run() == "Running multiple jobs:\nRunning single job 10\nRunning single job 11"
        assert composite.status() is JobStatus.RUNNING
        assert a.status() is JobStatus.RUNNING
        assert b.status() is JobStatus.RUNNING

    def test_stop_joins_children_in_order(self):
        a, b = SingleJob(10), SingleJob(11)
        composite = MultipleJob([a, b])

        assert composite.stop() == "Stopping multiple jobs:\nStopping single job 10\nStopping single job 11"
        assert composite.status() is JobStatus.STOPPED
        assert a.status() is JobStatus.STOPPED
        assert b.status() is JobStatus.STOPPED

    def test_empty_composite_returns_header(self):
        composite = MultipleJob([])
        assert composite.run() == "Running multiple jobs:\n"
        assert composite.stop() == "Stopping multiple jobs:\n"
        assert composite.status() is JobStatus.STOPPED

    def test_nested_output_is_depth_first(self, nested_jobs):
        assert nested_jobs.run() == (
            "Running multiple jobs:\n"
            "Running multiple jobs:\n"
            "Running single job 100\n"
            "Running single job 101\n"
            "Running single job 200"
        )
        assert nested_jobs.stop() == (
            "Stopping multiple jobs:\n"
            "Stopping multiple jobs:\n"
            "Stopping single job 100\n"
            "Stopping single job 101\n"
            "Stopping single job 200"
        )

    def test_run_reaches_every_descendant(self):
        leaves = [SingleJob(i) for i in range(4)]
        tree = MultipleJob([MultipleJob([MultipleJob([leaves[0]]), leaves[1]]), leaves[2], leaves[3]])

        tree.run()

        assert tree.status() is JobStatus.RUNNING
        assert all(leaf.status() is JobStatus.RUNNING for leaf in leaves)

    def test_status_is_not_derived_from_children(self):
        """Stopping a child directly leaves the composite's own status alone."""
        child = SingleJob(1)
        composite = MultipleJob([child])
        composite.run()

        child.stop()

        assert child.status() is JobStatus.STOPPED
        assert composite.status() is JobStatus.RUNNING

    def test_jobs_is_a_snapshot(self):
        composite = MultipleJob([SingleJob(1)])
        assert len(composite.jobs) == 1
        assert isinstance(composite.jobs, tuple)
        assert len(composite) == 1

    def test_constructor_copies_sequence(self):
        jobs = [SingleJob(1)]
        composite = MultipleJob(jobs)
        jobs.append(SingleJob(2))
        assert len(composite) == 1


class TestJob:
    def test_forwards_to_single(self):
        job = Job(SingleJob(1))
        assert job.status() is JobStatus.PENDING
        assert job.run() == "Running single job 1"
        assert job.status() is JobStatus.RUNNING
        assert job.stop() == "Stopping single job 1"
        assert job.status() is JobStatus.STOPPED

    def test_forwards_to_composite(self):
        job = Job(MultipleJob([SingleJob(10), SingleJob(11)]))
        assert job.status() is JobStatus.PENDING
        assert job.run() == "Running multiple jobs:\nRunning single job 10\nRunning single job 11"
        assert job.status() is JobStatus.RUNNING
        assert job.stop() == "Stopping multiple jobs:\nStopping single job 10\nStopping single job 11"
        assert job.status() is JobStatus.STOPPED

    def test_forwards_to_nested(self, nested_jobs):
        job = Job(nested_jobs)
        assert job.run().startswith("Running multiple jobs:\nRunning multiple jobs:\n")
        assert job.status() is JobStatus.RUNNING


class TestJobStatus:
    def test_reserved_states_exist(self):
        assert JobStatus.FAILED.value == "failed"
        assert JobStatus.COMPLETED.value == "completed"

    @pytest.mark.parametrize("status", list(JobStatus))
    def test_values_are_strings(self, status):
        assert status == status.value


def test_walk_jobs_visits_depth_first(nested_jobs):
    visited = [(depth, getattr(node, "id", None)) for depth, node in walk_jobs(nested_jobs)]
    assert visited == [(0, None), (1, None), (2, 100), (2, 101), (1, 200)]
